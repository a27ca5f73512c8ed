from typing import Any

from ..engine.EngineConfig import CONFIG_FORMATS
from ._ENV_PREFIXES import FORMAT_VAR, ORGANIZATION_VAR, QUALITY_VAR
from .EnvConfig import EnvConfig
from .get_env_config import get_env_config

MISSING_ORGANIZATION = f"{ORGANIZATION_VAR} is not set. Image optimization may not work correctly."


def validate_env_config(env: EnvConfig | None = None, strict: bool = False) -> dict[str, Any]:
    """Check environment settings.

    A missing organization is a warning, or an error when strict is set.

    Returns:
        {"is_valid": bool, "errors": [...], "warnings": [...]}
    """
    if env is None:
        env = get_env_config()

    errors: list[str] = []
    warnings: list[str] = []

    if not env.organization_name:
        (errors if strict else warnings).append(MISSING_ORGANIZATION)

    if env.default_quality is not None and not 1 <= env.default_quality <= 100:
        errors.append(f"{QUALITY_VAR} must be a number between 1 and 100")

    if env.default_format and env.default_format not in CONFIG_FORMATS:
        errors.append(f"{FORMAT_VAR} must be one of: {', '.join(CONFIG_FORMATS)}")

    return {"is_valid": not errors, "errors": errors, "warnings": warnings}
