"""iOS major/minor version."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IosVersion:
    """iOS version parsed from an 'OS 16_3' style user-agent token."""

    major: int
    minor: int
