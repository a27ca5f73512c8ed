import logging
import os
from collections.abc import Mapping

from ._ENV_PREFIXES import ENV_PREFIXES, FORMAT_VAR, ORGANIZATION_VAR, QUALITY_VAR
from .EnvConfig import EnvConfig

logger = logging.getLogger(__name__)


def _lookup(environ: Mapping[str, str], name: str) -> str | None:
    for prefix in ENV_PREFIXES:
        value = environ.get(f"{prefix}{name}")
        if value:
            return value
    return None


def get_env_config(environ: Mapping[str, str] | None = None) -> EnvConfig:
    """Read SNAPKIT_* settings (optionally REACT_APP_/NEXT_PUBLIC_ prefixed).

    A quality that is not an integer is dropped rather than reported.

    Args:
        environ: Variables to read; defaults to os.environ
    """
    if environ is None:
        environ = os.environ

    quality_raw = _lookup(environ, QUALITY_VAR)
    quality: int | None = None
    if quality_raw is not None:
        try:
            quality = int(quality_raw.strip())
        except ValueError:
            logger.debug(f"Ignoring non-numeric {QUALITY_VAR}: {quality_raw!r}")

    return EnvConfig(
        organization_name=_lookup(environ, ORGANIZATION_VAR),
        default_quality=quality,
        default_format=_lookup(environ, FORMAT_VAR),
    )
