"""Browser identity derived from a user-agent string."""

from dataclasses import dataclass
from typing import Literal

from .IosVersion import IosVersion

BrowserName = Literal["chrome", "firefox", "safari", "edge", "unknown"]
Platform = Literal["desktop", "ios", "android", "unknown"]


@dataclass(frozen=True)
class BrowserInfo:
    """Browser family, major version, platform and optional iOS version.

    version is 0 when it could not be determined.
    """

    name: BrowserName = "unknown"
    version: int = 0
    platform: Platform = "unknown"
    ios_version: IosVersion | None = None

    @property
    def is_ios(self) -> bool:
        return self.ios_version is not None
