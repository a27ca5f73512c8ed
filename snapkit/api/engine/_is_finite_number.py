import math
from typing import Any


def _is_finite_number(value: Any) -> bool:
    """True for int/float values that are finite (bools are not numbers here)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)
