"""Network-aware quality adjustment."""

from .adjust_quality_for_connection import adjust_quality_for_connection
from .ConnectionInfo import EFFECTIVE_TYPES, ConnectionInfo
from .detect_network_speed import detect_network_speed

__all__ = [
    "EFFECTIVE_TYPES",
    "ConnectionInfo",
    "adjust_quality_for_connection",
    "detect_network_speed",
]
