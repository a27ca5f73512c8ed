"""Layered engine configuration: explicit values, environment, defaults."""

from .cmd_show import cmd_show
from .EnvConfig import EnvConfig
from .get_env_config import get_env_config
from .merge_config_with_env import merge_config_with_env
from .validate_env_config import validate_env_config

__all__ = [
    "EnvConfig",
    "cmd_show",
    "get_env_config",
    "merge_config_with_env",
    "validate_env_config",
]
