"""Unit tests for environment-based configuration."""

import pytest

from snapkit.api.config.EnvConfig import EnvConfig
from snapkit.api.config.get_env_config import get_env_config
from snapkit.api.config.merge_config_with_env import merge_config_with_env
from snapkit.api.config.validate_env_config import validate_env_config
from snapkit.api.engine.ConfigError import ConfigError
from snapkit.api.engine.EngineConfig import EngineConfig

pytestmark = pytest.mark.config


class TestGetEnvConfig:
    def test_empty_environment(self):
        assert get_env_config({}) == EnvConfig()

    def test_bare_variables(self):
        env = get_env_config(
            {
                "SNAPKIT_ORGANIZATION_NAME": "acme",
                "SNAPKIT_DEFAULT_QUALITY": "70",
                "SNAPKIT_DEFAULT_OPTIMIZE_FORMAT": "webp",
            }
        )
        assert env == EnvConfig(organization_name="acme", default_quality=70, default_format="webp")

    def test_prefixed_variables_win_over_bare(self):
        env = get_env_config(
            {
                "SNAPKIT_ORGANIZATION_NAME": "bare",
                "NEXT_PUBLIC_SNAPKIT_ORGANIZATION_NAME": "next",
                "REACT_APP_SNAPKIT_ORGANIZATION_NAME": "react",
            }
        )
        assert env.organization_name == "react"

    def test_empty_prefixed_value_is_skipped(self):
        env = get_env_config({"NEXT_PUBLIC_SNAPKIT_ORGANIZATION_NAME": "", "SNAPKIT_ORGANIZATION_NAME": "bare"})
        assert env.organization_name == "bare"

    def test_non_numeric_quality_is_dropped(self):
        assert get_env_config({"SNAPKIT_DEFAULT_QUALITY": "high"}).default_quality is None

    def test_reads_process_environment(self, clean_env):
        clean_env.setenv("SNAPKIT_ORGANIZATION_NAME", "from-env")
        assert get_env_config().organization_name == "from-env"


class TestValidateEnvConfig:
    def test_valid(self):
        result = validate_env_config(EnvConfig(organization_name="acme", default_quality=80, default_format="auto"))
        assert result == {"is_valid": True, "errors": [], "warnings": []}

    def test_missing_organization_is_a_warning(self):
        result = validate_env_config(EnvConfig())
        assert result["is_valid"]
        assert result["warnings"] == ["SNAPKIT_ORGANIZATION_NAME is not set. Image optimization may not work correctly."]

    def test_missing_organization_is_an_error_when_strict(self):
        result = validate_env_config(EnvConfig(), strict=True)
        assert not result["is_valid"]
        assert result["warnings"] == []
        assert len(result["errors"]) == 1

    def test_bad_quality_and_format(self):
        result = validate_env_config(EnvConfig(organization_name="acme", default_quality=0, default_format="gif"))
        assert not result["is_valid"]
        assert len(result["errors"]) == 2


class TestMergeConfigWithEnv:
    ENV = {
        "SNAPKIT_ORGANIZATION_NAME": "env-org",
        "SNAPKIT_DEFAULT_QUALITY": "60",
        "SNAPKIT_DEFAULT_OPTIMIZE_FORMAT": "webp",
    }

    def test_environment_fills_missing_values(self):
        assert merge_config_with_env({}, self.ENV) == EngineConfig("env-org", 60, "webp")

    def test_explicit_values_win(self):
        config = merge_config_with_env({"organizationName": "acme", "default_quality": 90}, self.ENV)
        assert config == EngineConfig("acme", 90, "webp")

    def test_defaults_apply_last(self):
        assert merge_config_with_env({"organization_name": "acme"}, {}) == EngineConfig("acme", 85, "auto")

    def test_missing_organization_raises(self):
        with pytest.raises(ConfigError, match="SNAPKIT_ORGANIZATION_NAME is not set"):
            merge_config_with_env({}, {})

    def test_invalid_merged_values_raise(self):
        with pytest.raises(ConfigError, match="default_format"):
            merge_config_with_env({"organization_name": "acme"}, {"SNAPKIT_DEFAULT_OPTIMIZE_FORMAT": "gif"})

    def test_strict_mode_rejects_bad_environment(self):
        with pytest.raises(ConfigError, match="Invalid environment variables"):
            merge_config_with_env({"organization_name": "acme"}, {}, strict=True)
