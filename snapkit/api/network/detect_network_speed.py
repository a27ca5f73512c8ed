from typing import Literal

from .ConnectionInfo import ConnectionInfo

NetworkSpeed = Literal["fast", "slow", "offline"]


def detect_network_speed(connection: ConnectionInfo | None = None) -> NetworkSpeed:
    """Classify connection hints as fast, slow or offline."""
    if connection is None:
        return "fast"
    if not connection.online:
        return "offline"
    if connection.save_data or connection.effective_type in ("slow-2g", "2g"):
        return "slow"
    return "fast"
