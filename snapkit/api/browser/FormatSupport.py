"""Modern image format support flags."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatSupport:
    """Whether a client can decode AVIF and WebP."""

    avif: bool = False
    webp: bool = False

    def supports(self, fmt: str) -> bool:
        """Return True if fmt can be decoded (baseline formats always can)."""
        if fmt in ("jpeg", "jpg", "png"):
            return True
        if fmt == "avif":
            return self.avif
        if fmt == "webp":
            return self.webp
        return False
