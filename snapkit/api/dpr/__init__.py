"""Pixel-density variant selection."""

from .DprOptions import DprOptions
from .get_network_aware_dpr_limit import get_network_aware_dpr_limit
from .get_optimal_dpr_values import get_optimal_dpr_values
from .should_use_3x_images import should_use_3x_images

__all__ = [
    "DprOptions",
    "get_network_aware_dpr_limit",
    "get_optimal_dpr_values",
    "should_use_3x_images",
]
