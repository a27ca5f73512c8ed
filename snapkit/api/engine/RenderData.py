"""Engine output for one render."""

from dataclasses import dataclass
from typing import Any

from ..transform.TransformSet import TransformSet


@dataclass(frozen=True)
class RenderData:
    """Main URL, srcset, resolved size and transforms for one render call."""

    url: str
    src_set: str
    size: tuple[float | None, float | None]
    transforms: TransformSet
    adjusted_quality: int

    @property
    def width(self) -> float | None:
        return self.size[0]

    @property
    def height(self) -> float | None:
        return self.size[1]

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "src_set": self.src_set,
            "size": {"width": self.width, "height": self.height},
            "transforms": self.transforms.model_dump(mode="json", exclude_none=True),
            "adjusted_quality": self.adjusted_quality,
        }
