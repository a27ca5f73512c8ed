"""Snapkit image-delivery decision engine."""

from .api.engine.EngineCache import EngineCache
from .api.engine.EngineConfig import EngineConfig
from .api.engine.ImageEngine import ImageEngine
from .api.engine.RenderData import RenderData
from .api.engine.RenderRequest import RenderRequest

__version__ = "0.1.0"

__all__ = [
    "EngineCache",
    "EngineConfig",
    "ImageEngine",
    "RenderData",
    "RenderRequest",
    "__version__",
]
