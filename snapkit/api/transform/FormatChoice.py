"""Format selection as an explicit tagged value."""

from dataclasses import dataclass
from typing import Literal

from ..browser.FormatSupport import FormatSupport
from ..browser.get_best_supported_format import get_best_supported_format
from .TransformSet import IMAGE_FORMATS

FormatMode = Literal["explicit", "auto", "disabled"]


@dataclass(frozen=True)
class FormatChoice:
    """Explicit(format) | Auto | Disabled.

    Resolved to a concrete format (or None, meaning "leave the format out of the
    request") exactly once, at the engine boundary.
    """

    mode: FormatMode
    format: str | None = None

    def __post_init__(self):
        if self.mode == "explicit" and self.format not in IMAGE_FORMATS:
            raise ValueError(f"Unknown image format: {self.format!r} (expected one of {', '.join(IMAGE_FORMATS)})")
        if self.mode != "explicit" and self.format is not None:
            raise ValueError(f"Format choice '{self.mode}' cannot carry a format")

    @classmethod
    def explicit(cls, fmt: str) -> "FormatChoice":
        return cls("explicit", fmt)

    @classmethod
    def auto(cls) -> "FormatChoice":
        return cls("auto")

    @classmethod
    def disabled(cls) -> "FormatChoice":
        return cls("disabled")

    @classmethod
    def parse(cls, value: str | None) -> "FormatChoice":
        """Parse a format name, "auto", "off" or None.

        Raises:
            ValueError: If value is not a recognized format or sentinel
        """
        if value is None or value == "auto":
            return cls.auto()
        if value == "off":
            return cls.disabled()
        return cls.explicit(value)

    def resolve(self, support: FormatSupport | None = None) -> str | None:
        """Return the format to request, or None to omit it.

        Explicit formats the client cannot decode fall through AVIF -> WebP -> JPEG.
        Auto picks the best modern format the client supports and otherwise
        leaves the source format alone.
        """
        if self.mode == "disabled":
            return None

        if self.mode == "explicit":
            if support is None or support.supports(self.format):
                return self.format
            return get_best_supported_format(self.format, support)

        if support is None:
            return None
        best = get_best_supported_format(None, support)
        return best if best in ("avif", "webp") else None
