from urllib.parse import parse_qs, urlparse


def _first_int(params: dict[str, list[str]], *keys: str) -> int | None:
    for key in keys:
        values = params.get(key)
        if values:
            try:
                return int(float(values[0]))
            except ValueError:
                return None
    return None


def extract_dimensions_from_url(url: str) -> tuple[int, int] | None:
    """Read (width, height) back from an image URL's w/h query parameters.

    Returns None unless url is absolute and carries both dimensions.
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return None
    if not parsed.scheme or not parsed.netloc:
        return None

    params = parse_qs(parsed.query)
    width = _first_int(params, "w", "width")
    height = _first_int(params, "h", "height")
    if width is None or height is None:
        return None
    return width, height
