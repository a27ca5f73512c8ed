from collections.abc import Sequence

from ._CONSTANTS import DEFAULT_MAX_WIDTH, DEFAULT_MIN_WIDTH, DEFAULT_MULTIPLIERS
from ._round_half_up import _round_half_up


def generate_responsive_widths(
    base_width: float,
    multipliers: Sequence[float] | None = None,
    min_width: int = DEFAULT_MIN_WIDTH,
    max_width: int = DEFAULT_MAX_WIDTH,
) -> list[int]:
    """Scale base_width by each multiplier and keep widths inside [min_width, max_width].

    Example:
        generate_responsive_widths(1200) -> [300, 600, 900, 1200, 1500, 1800, 2400]
    """
    if multipliers is None:
        multipliers = DEFAULT_MULTIPLIERS
    if not base_width or not multipliers:
        return []

    widths = {_round_half_up(base_width * multiplier) for multiplier in multipliers}
    return sorted(width for width in widths if min_width <= width <= max_width)
