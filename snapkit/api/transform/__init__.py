"""Transform model and query serialization."""

from .Extract import Extract
from .FormatChoice import FormatChoice
from .serialize_transforms import serialize_transforms
from .TransformSet import IMAGE_FORMATS, TransformSet

__all__ = [
    "IMAGE_FORMATS",
    "Extract",
    "FormatChoice",
    "TransformSet",
    "serialize_transforms",
]
