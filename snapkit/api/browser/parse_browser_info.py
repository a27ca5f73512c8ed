"""User-agent parsing."""

import re

from .BrowserInfo import BrowserInfo, Platform
from .IosVersion import IosVersion

_IOS_VERSION = re.compile(r"OS (\d+)_(\d+)")
_CHROME = re.compile(r"Chrome/(\d+)")
_IOS_CHROME = re.compile(r"CriOS/(\d+)")
_FIREFOX = re.compile(r"Firefox/(\d+)")
_EDGE = re.compile(r"Edg/(\d+)")
_LEGACY_EDGE = re.compile(r"Edge/(\d+)")
_SAFARI = re.compile(r"Version/(\d+).*Safari")


def _detect_platform(user_agent: str, ios_version: IosVersion | None) -> Platform:
    # iOS build tokens win over the generic platform tokens
    if ios_version is not None:
        return "ios"
    if "Android" in user_agent:
        return "android"
    if any(token in user_agent for token in ("Windows", "Macintosh", "Linux")):
        return "desktop"
    return "unknown"


def parse_browser_info(user_agent: str) -> BrowserInfo:
    """Parse a user-agent string into browser family, version and platform.

    Edge is checked before Chrome since Edge user agents carry a Chrome token.
    Chromium on iOS (CriOS) reports as chrome with platform "ios".

    Args:
        user_agent: Raw User-Agent header value

    Returns:
        BrowserInfo; unrecognized agents yield name "unknown" and version 0
    """
    ua = user_agent or ""

    ios_match = _IOS_VERSION.search(ua)
    ios_version = IosVersion(int(ios_match.group(1)), int(ios_match.group(2))) if ios_match else None
    platform = _detect_platform(ua, ios_version)

    edge = _EDGE.search(ua) or _LEGACY_EDGE.search(ua)
    if edge:
        return BrowserInfo("edge", int(edge.group(1)), platform, ios_version)

    chrome = _CHROME.search(ua) or _IOS_CHROME.search(ua)
    if chrome:
        return BrowserInfo("chrome", int(chrome.group(1)), platform, ios_version)

    firefox = _FIREFOX.search(ua)
    if firefox:
        return BrowserInfo("firefox", int(firefox.group(1)), platform, ios_version)

    safari = _SAFARI.search(ua)
    if safari or platform == "ios":
        version = int(safari.group(1)) if safari else 0
        return BrowserInfo("safari", version, platform, ios_version)

    return BrowserInfo("unknown", 0, platform, ios_version)
