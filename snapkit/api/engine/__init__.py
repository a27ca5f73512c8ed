"""Engine orchestration and instance caching."""

from .ConfigError import ConfigError
from .create_image_loader import create_image_loader
from .EngineCache import EngineCache, full_config_key, organization_key
from .EngineConfig import CONFIG_FORMATS, EngineConfig
from .ImageEngine import FILL_MODE_WIDTH, SIZES_MULTIPLIERS, ImageEngine
from .RenderData import RenderData
from .RenderRequest import RenderRequest
from .ValidationError import ValidationError
from .ValidationResult import ValidationResult

__all__ = [
    "CONFIG_FORMATS",
    "FILL_MODE_WIDTH",
    "SIZES_MULTIPLIERS",
    "ConfigError",
    "EngineCache",
    "EngineConfig",
    "ImageEngine",
    "RenderData",
    "RenderRequest",
    "ValidationError",
    "ValidationResult",
    "create_image_loader",
    "full_config_key",
    "organization_key",
]
