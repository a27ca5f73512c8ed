from urllib.parse import urlparse

SERVICE_HOST_SUFFIXES = ("snapkit.studio", "snapkit-cdn.com", "snapkit.com")


def is_service_url(url: str) -> bool:
    """Return True if url points at the image service."""
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return False
    if not hostname:
        return False
    return any(hostname == suffix or hostname.endswith("." + suffix) for suffix in SERVICE_HOST_SUFFIXES)
