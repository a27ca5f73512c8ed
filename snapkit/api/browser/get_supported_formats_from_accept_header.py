def get_supported_formats_from_accept_header(accept_header: str) -> list[str]:
    """List image formats advertised by an HTTP Accept header.

    Order is avif, webp, jpeg, png; 'image/*' implies jpeg and png.
    """
    accept = accept_header or ""
    formats: list[str] = []

    if "image/avif" in accept:
        formats.append("avif")
    if "image/webp" in accept:
        formats.append("webp")
    if "image/jpeg" in accept or "image/*" in accept:
        formats.append("jpeg")
    if "image/png" in accept or "image/*" in accept:
        formats.append("png")

    return formats
