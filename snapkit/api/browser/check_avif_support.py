from ._SUPPORT_RULES import AVIF_RULES
from .BrowserInfo import BrowserInfo
from .SupportRule import SupportRule


def check_avif_support(info: BrowserInfo) -> bool:
    """Return True if the browser can decode AVIF."""
    return SupportRule.evaluate(AVIF_RULES, info)
