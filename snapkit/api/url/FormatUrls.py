"""Per-format URL triple."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatUrls:
    """AVIF-forced, WebP-forced and format-stripped variants of one request."""

    avif: str
    webp: str
    original: str
