"""Browser compatibility resolution."""

from .BrowserInfo import BrowserInfo
from .check_avif_support import check_avif_support
from .check_webp_support import check_webp_support
from .FormatSupport import FormatSupport
from .FormatSupportCache import FormatSupportCache
from .get_best_supported_format import get_best_supported_format
from .get_format_support_from_ua import get_format_support_from_ua
from .get_supported_formats_from_accept_header import get_supported_formats_from_accept_header
from .IosVersion import IosVersion
from .parse_browser_info import parse_browser_info
from .SupportRule import SupportRule

__all__ = [
    "BrowserInfo",
    "FormatSupport",
    "FormatSupportCache",
    "IosVersion",
    "SupportRule",
    "check_avif_support",
    "check_webp_support",
    "get_best_supported_format",
    "get_format_support_from_ua",
    "get_supported_formats_from_accept_header",
    "parse_browser_info",
]
