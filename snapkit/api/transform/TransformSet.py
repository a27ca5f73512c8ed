"""Image transformation parameters sent to the image service."""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .Extract import Extract

ImageFormat = Literal["jpeg", "jpg", "png", "webp", "avif", "auto"]
FitMode = Literal["contain", "cover", "fill", "inside", "outside"]

# Concrete formats the service can be asked for; "auto" is a sentinel, not a format.
IMAGE_FORMATS: tuple[str, ...] = ("jpeg", "jpg", "png", "webp", "avif")


class TransformSet(BaseModel):
    """Named optimization parameters for one image request.

    Unknown keys are kept as custom fields and serialized after the known ones.
    """

    model_config = ConfigDict(extra="allow")

    # Size adjustment
    width: int | float | None = None
    height: int | float | None = None
    dpr: int | float | None = None
    fit: FitMode | None = None

    # Flipping
    flip: bool | None = None
    flop: bool | None = None

    # Visual effects
    blur: bool | int | float | None = None
    grayscale: bool | None = None
    brightness: int | float | None = None
    hue: int | float | None = None
    lightness: int | float | None = None
    saturation: int | float | None = None
    negate: bool | None = None
    normalize: bool | None = None

    # Region and canvas
    extract: Extract | None = None
    background: tuple[float, float, float, float] | None = None

    # Output
    quality: int | None = Field(None, ge=1, le=100)
    format: ImageFormat | None = None
    timeout: int | None = None

    @classmethod
    def coerce(cls, value: "TransformSet | Mapping[str, Any] | None") -> "TransformSet":
        """Return value as a TransformSet (None becomes an empty set)."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.model_validate(dict(value))

    def merged(self, **updates: Any) -> "TransformSet":
        """Return a copy with the given fields replaced (None clears a field)."""
        return self.model_copy(update=updates)
