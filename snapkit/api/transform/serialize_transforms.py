"""Canonical query-string serialization of a TransformSet."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from ._format_value import _format_value
from .TransformSet import TransformSet

# Fixed key order; size first so density variants differ only after w/h.
_FIELD_ORDER = (
    "width",
    "height",
    "dpr",
    "fit",
    "flip",
    "flop",
    "blur",
    "grayscale",
    "brightness",
    "hue",
    "lightness",
    "saturation",
    "negate",
    "normalize",
    "extract",
    "background",
    "format",
    "quality",
    "timeout",
)
_QUERY_KEYS = {"width": "w", "height": "h"}
_FLAGS = frozenset({"flip", "flop", "grayscale", "negate", "normalize"})
# Custom extras may not shadow a known field or its short query key.
_RESERVED_KEYS = frozenset(_FIELD_ORDER) | frozenset(_QUERY_KEYS.values())


def _encode_field(name: str, value: Any) -> str | None:
    if value is None:
        return None
    if name in _FLAGS:
        return _format_value(bool(value))
    if name == "extract":
        return _format_value((value.x, value.y, value.width, value.height))
    if name == "background":
        return _format_value(value)
    if name == "format" and value == "auto":
        return None
    if not value:
        return None
    return _format_value(value)


def _encode_custom(value: Any) -> str | None:
    if value is None or value == "" or value == [] or value == ():
        return None
    return _format_value(value)


def serialize_transforms(transforms: TransformSet | Mapping[str, Any] | None) -> str:
    """Turn a transform set into a query string (without the leading '?').

    Args:
        transforms: TransformSet or plain mapping of transform fields

    Returns:
        URL-encoded query string, empty when nothing serializes
    """
    transforms = TransformSet.coerce(transforms)
    pairs: list[tuple[str, str]] = []

    for name in _FIELD_ORDER:
        encoded = _encode_field(name, getattr(transforms, name))
        if encoded is not None:
            pairs.append((_QUERY_KEYS.get(name, name), encoded))

    for name, value in (transforms.model_extra or {}).items():
        if name in _RESERVED_KEYS:
            continue
        encoded = _encode_custom(value)
        if encoded is not None:
            pairs.append((name, encoded))

    return urlencode(pairs)
