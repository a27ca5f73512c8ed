from ..browser.FormatSupport import FormatSupport
from ..network.ConnectionInfo import ConnectionInfo
from .DprOptions import DprOptions
from .get_network_aware_dpr_limit import get_network_aware_dpr_limit


def should_use_3x_images(
    options: DprOptions | None = None,
    connection: ConnectionInfo | None = None,
    format_support: FormatSupport | None = None,
) -> bool:
    """Decide whether 3x variants are worth serving.

    Refused for an unknown or sub-2.75 device ratio, under a network ceiling below 3, with
    max_dpr below 3, or when AVIF is available (2x AVIF is usually enough).
    """
    options = options or DprOptions()

    if options.device_pixel_ratio is None or options.device_pixel_ratio < 2.75:
        return False
    if get_network_aware_dpr_limit(connection) < 3:
        return False
    if options.max_dpr < 3:
        return False
    if format_support is not None and format_support.avif:
        return False
    return True
