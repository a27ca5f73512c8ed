import math

from ._CONSTANTS import DEFAULT_MAX_WIDTH, MAX_IMAGE_HEIGHT


def calculate_optimal_image_size(
    container_width: float,
    container_height: float | None = None,
    device_pixel_ratio: float = 1,
) -> tuple[int, int | None]:
    """Physical pixel size needed to fill a container, capped at 3840x2160."""
    width = min(math.ceil(container_width * device_pixel_ratio), DEFAULT_MAX_WIDTH)
    height = None
    if container_height:
        height = min(math.ceil(container_height * device_pixel_ratio), MAX_IMAGE_HEIGHT)
    return width, height
