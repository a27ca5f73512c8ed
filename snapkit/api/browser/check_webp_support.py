from ._SUPPORT_RULES import WEBP_RULES
from .BrowserInfo import BrowserInfo
from .SupportRule import SupportRule


def check_webp_support(info: BrowserInfo) -> bool:
    """Return True if the browser can decode WebP."""
    return SupportRule.evaluate(WEBP_RULES, info)
