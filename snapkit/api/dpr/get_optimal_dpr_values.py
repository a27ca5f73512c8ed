import logging

from .DprOptions import DprOptions

logger = logging.getLogger(__name__)


def _standard_dpr_set(max_dpr: float) -> list[float]:
    dprs: list[float] = [1]
    if max_dpr >= 2:
        dprs.append(2)
    if max_dpr >= 3:
        dprs.append(3)
    return dprs


def get_optimal_dpr_values(options: DprOptions | None = None) -> list[float]:
    """Choose which pixel-ratio multiples to request.

    Priority: forced value, custom list (filtered to 0 < dpr <= max_dpr and
    sorted), standard ladder when auto-detection is off or the device ratio is
    unknown, else a ladder based on the device ratio.
    """
    options = options or DprOptions()
    max_dpr = options.max_dpr

    if options.force_dpr is not None and options.force_dpr > 0:
        return [options.force_dpr]

    if options.custom_dprs:
        return sorted(dpr for dpr in options.custom_dprs if 0 < dpr <= max_dpr)

    device_dpr = options.device_pixel_ratio
    if not options.auto_detect or device_dpr is None:
        return _standard_dpr_set(max_dpr)

    if device_dpr <= 1:
        return [1]
    if device_dpr <= 1.5:
        return [1, 1.5]
    if device_dpr <= 2:
        return [1, 2]
    if device_dpr <= 2.5:
        # 3x brings little over 2x at this density
        return [1, 2]

    dprs: list[float] = [1, 2]
    if max_dpr >= 3 and device_dpr >= 2.75:
        dprs.append(3)
    logger.debug(f"DPR ladder for device ratio {device_dpr}: {dprs}")
    return dprs
