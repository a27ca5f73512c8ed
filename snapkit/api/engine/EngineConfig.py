"""Engine configuration."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..transform.TransformSet import IMAGE_FORMATS
from ._is_finite_number import _is_finite_number
from .ConfigError import ConfigError

DEFAULT_QUALITY = 85
DEFAULT_FORMAT = "auto"
CONFIG_FORMATS: tuple[str, ...] = (*IMAGE_FORMATS, "auto", "off")

CAMEL_CASE_KEYS = {
    "organizationName": "organization_name",
    "defaultQuality": "default_quality",
    "defaultFormat": "default_format",
}


@dataclass(frozen=True)
class EngineConfig:
    """Organization and defaults an ImageEngine is built from."""

    organization_name: str
    default_quality: int = DEFAULT_QUALITY
    default_format: str = DEFAULT_FORMAT

    def _validate_organization_name(self) -> list[str]:
        """Validate organization_name is a non-empty string."""
        errors: list[str] = []

        if not isinstance(self.organization_name, str) or not self.organization_name.strip():
            errors.append(
                f"organization_name must be a non-empty string "
                f"(found: {type(self.organization_name).__name__} = {self.organization_name!r})"
            )

        return errors

    def _validate_default_quality(self) -> list[str]:
        """Validate default_quality is a number between 1 and 100."""
        errors: list[str] = []

        quality = self.default_quality
        if not _is_finite_number(quality) or not 1 <= quality <= 100:
            errors.append(
                f"default_quality must be a number between 1 and 100 "
                f"(found: {type(quality).__name__} = {quality!r})"
            )

        return errors

    def _validate_default_format(self) -> list[str]:
        """Validate default_format is a recognized format or sentinel."""
        errors: list[str] = []

        if self.default_format not in CONFIG_FORMATS:
            errors.append(
                f"default_format must be one of: {', '.join(CONFIG_FORMATS)} (found: {self.default_format!r})"
            )

        return errors

    def __post_init__(self):
        """Validate configuration after initialization."""
        errors: list[str] = []
        errors.extend(self._validate_organization_name())
        errors.extend(self._validate_default_quality())
        errors.extend(self._validate_default_format())

        if errors:
            raise ConfigError(errors)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EngineConfig":
        """Build from a mapping; camelCase keys are accepted. None values fall back to defaults.

        Raises:
            ConfigError: On unknown keys or invalid values
        """
        normalized = {CAMEL_CASE_KEYS.get(key, key): value for key, value in data.items() if value is not None}
        unknown = sorted(set(normalized) - {"organization_name", "default_quality", "default_format"})
        if unknown:
            raise ConfigError([f"Unknown configuration key(s): {', '.join(unknown)}"])
        if "organization_name" not in normalized:
            raise ConfigError(["organization_name is required"])
        return cls(**normalized)

    def to_dict(self) -> dict[str, Any]:
        return {
            "organization_name": self.organization_name,
            "default_quality": self.default_quality,
            "default_format": self.default_format,
        }
