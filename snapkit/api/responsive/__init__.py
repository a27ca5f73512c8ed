"""Responsive width resolution."""

from ._CONSTANTS import DEFAULT_BREAKPOINTS, DEFAULT_MULTIPLIERS, REFERENCE_VIEWPORT_WIDTHS
from .calculate_image_sizes import calculate_image_sizes
from .calculate_optimal_image_size import calculate_optimal_image_size
from .generate_responsive_widths import generate_responsive_widths
from .parse_image_sizes import parse_image_sizes

__all__ = [
    "DEFAULT_BREAKPOINTS",
    "DEFAULT_MULTIPLIERS",
    "REFERENCE_VIEWPORT_WIDTHS",
    "calculate_image_sizes",
    "calculate_optimal_image_size",
    "generate_responsive_widths",
    "parse_image_sizes",
]
