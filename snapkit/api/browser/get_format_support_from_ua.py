from .check_avif_support import check_avif_support
from .check_webp_support import check_webp_support
from .FormatSupport import FormatSupport
from .parse_browser_info import parse_browser_info


def get_format_support_from_ua(user_agent: str) -> FormatSupport:
    """Estimate AVIF/WebP support from a user-agent string."""
    info = parse_browser_info(user_agent)
    return FormatSupport(avif=check_avif_support(info), webp=check_webp_support(info))
