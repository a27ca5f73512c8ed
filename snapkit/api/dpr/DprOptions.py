"""Pixel-density selection options."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DprOptions:
    """Options for choosing device-pixel-ratio variants.

    device_pixel_ratio is supplied by the host. None means the device is unknown
    (server-side render), in which case the standard ladder capped at max_dpr is used.
    """

    max_dpr: float = 3
    auto_detect: bool = True
    force_dpr: float | None = None
    custom_dprs: tuple[float, ...] | list[float] | None = None
    device_pixel_ratio: float | None = None
