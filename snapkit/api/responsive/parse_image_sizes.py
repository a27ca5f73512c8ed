import logging
import re

from ._CONSTANTS import REFERENCE_VIEWPORT_WIDTHS
from ._round_half_up import _round_half_up

logger = logging.getLogger(__name__)

_SIZE_TOKEN = re.compile(r"(\d+)(px|vw)")


def parse_image_sizes(sizes: str) -> list[int]:
    """Extract candidate pixel widths from a CSS sizes expression.

    px tokens are taken literally; each vw token is evaluated against every
    reference viewport width. Media-query conditions contribute their px
    values too, the expression is not interpreted.

    Example:
        parse_image_sizes("(max-width: 768px) 100vw, 50vw")
        -> [188, 375, 384, 512, 640, 768, 960, 1024, 1280, 1920]

    Returns:
        Sorted unique widths; empty for empty or unparseable input
    """
    if not sizes:
        return []

    widths: set[int] = set()
    for value, unit in _SIZE_TOKEN.findall(sizes):
        amount = int(value)
        if unit == "px":
            widths.add(amount)
        else:
            for viewport in REFERENCE_VIEWPORT_WIDTHS:
                widths.add(_round_half_up(viewport * amount / 100))

    if not widths:
        logger.debug(f"No px/vw tokens in sizes expression: {sizes!r}")
    return sorted(widths)
