from typing import Any

from ._is_finite_number import _is_finite_number


def _request_field_errors(src: Any, width: Any = None, height: Any = None, quality: Any = None) -> list[str]:
    """Collect every violation among src/width/height/quality."""
    errors: list[str] = []

    if not isinstance(src, str) or not src:
        errors.append("src must be a non-empty string")

    if width is not None and (not _is_finite_number(width) or width <= 0):
        errors.append("width must be a positive number")

    if height is not None and (not _is_finite_number(height) or height <= 0):
        errors.append("height must be a positive number")

    if quality is not None and (not _is_finite_number(quality) or not 1 <= quality <= 100):
        errors.append("quality must be a number between 1 and 100")

    return errors
