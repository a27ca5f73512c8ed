import logging
from collections.abc import Mapping
from typing import Any

from ..engine.ConfigError import ConfigError
from ..engine.EngineConfig import CAMEL_CASE_KEYS, DEFAULT_FORMAT, DEFAULT_QUALITY, EngineConfig
from .get_env_config import get_env_config
from .validate_env_config import MISSING_ORGANIZATION, validate_env_config

logger = logging.getLogger(__name__)


def merge_config_with_env(
    explicit: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    strict: bool = False,
) -> EngineConfig:
    """Resolve an EngineConfig: explicit values, then environment, then defaults.

    Raises:
        ConfigError: If no organization can be resolved, strict validation of
            the environment fails, or the merged values are invalid
    """
    explicit = {CAMEL_CASE_KEYS.get(key, key): value for key, value in (explicit or {}).items()}
    env = get_env_config(environ)

    if strict:
        validation = validate_env_config(env, strict=True)
        for warning in validation["warnings"]:
            logger.warning(f"Environment warning: {warning}")
        if not validation["is_valid"]:
            raise ConfigError([f"Invalid environment variables: {error}" for error in validation["errors"]])

    def pick(key: str, env_value: Any, default: Any) -> Any:
        value = explicit.get(key)
        if value is not None:
            return value
        if env_value is not None:
            return env_value
        return default

    organization_name = pick("organization_name", env.organization_name, None)
    if organization_name is None:
        raise ConfigError([MISSING_ORGANIZATION])

    return EngineConfig(
        organization_name=organization_name,
        default_quality=pick("default_quality", env.default_quality, DEFAULT_QUALITY),
        default_format=pick("default_format", env.default_format, DEFAULT_FORMAT),
    )
