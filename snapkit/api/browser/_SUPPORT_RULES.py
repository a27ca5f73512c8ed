"""Format support tables, evaluated top to bottom."""

from .BrowserInfo import BrowserInfo
from .SupportRule import SupportRule

_family = SupportRule.family
_min_version = SupportRule.min_version


def _is_ios_16_early(info: BrowserInfo) -> bool:
    ios = info.ios_version
    return ios is not None and ios.major == 16 and 0 <= ios.minor <= 3


def _ios_at_least(major: int, minor: int = 0):
    def check(info: BrowserInfo) -> bool:
        ios = info.ios_version
        if ios is None:
            return False
        return (ios.major, ios.minor) >= (major, minor)

    return check


def _safari_webp(info: BrowserInfo) -> bool:
    if info.ios_version is not None:
        return info.ios_version.major >= 14
    return info.version >= 14


AVIF_RULES: tuple[SupportRule, ...] = (
    # iOS 16.0-16.3 decoder defect, applies to every browser on the device
    SupportRule(_is_ios_16_early, lambda _info: False, "iOS 16.0-16.3 AVIF decoder defect"),
    SupportRule(_family("chrome"), _min_version(85), "Chrome 85+"),
    SupportRule(_family("firefox"), _min_version(93), "Firefox 93+"),
    SupportRule(_family("edge"), _min_version(91), "Edge 91+"),
    SupportRule(_family("safari"), _ios_at_least(16, 4), "Safari on iOS 16.4+"),
)

WEBP_RULES: tuple[SupportRule, ...] = (
    SupportRule(_family("chrome"), _min_version(23), "Chrome 23+"),
    SupportRule(_family("firefox"), _min_version(65), "Firefox 65+"),
    # version 0 is legacy EdgeHTML
    SupportRule(_family("edge"), lambda info: info.version >= 14 or info.version == 0, "Edge 14+ or legacy"),
    SupportRule(_family("safari"), _safari_webp, "Safari 14+"),
)
