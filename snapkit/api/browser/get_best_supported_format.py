from .FormatSupport import FormatSupport


def get_best_supported_format(preferred: str | None = None, support: FormatSupport | None = None) -> str:
    """Pick the best format along the AVIF -> WebP -> JPEG preference chain.

    Args:
        preferred: Requested format; honored when the client supports it
        support: Client decode capabilities, None when unknown

    Returns:
        "avif", "webp", "jpeg", or the preferred baseline format
    """
    if support is None:
        # Nothing known about the client
        return "jpeg"

    if preferred and preferred != "auto" and support.supports(preferred):
        return preferred

    if support.avif:
        return "avif"
    if support.webp:
        return "webp"
    return "jpeg"
