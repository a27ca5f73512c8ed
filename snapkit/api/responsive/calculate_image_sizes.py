from ._round_half_up import _round_half_up


def calculate_image_sizes(
    base_width: float,
    base_height: float | None = None,
    device_pixel_ratio: float = 1,
) -> tuple[int, int | None]:
    """Scale a logical size by the device pixel ratio."""
    width = _round_half_up(base_width * device_pixel_ratio)
    height = _round_half_up(base_height * device_pixel_ratio) if base_height is not None else None
    return width, height
