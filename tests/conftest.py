"""Shared pytest configuration and fixtures for all tests."""

import pytest

from snapkit.api.engine.EngineConfig import EngineConfig

_ENV_VARS = (
    "SNAPKIT_ORGANIZATION_NAME",
    "SNAPKIT_DEFAULT_QUALITY",
    "SNAPKIT_DEFAULT_OPTIMIZE_FORMAT",
)
_ENV_PREFIXES = ("", "NEXT_PUBLIC_", "REACT_APP_")


def pytest_configure(config):
    for marker in ("unit", "smoke", "integration"):
        config.addinivalue_line("markers", f"{marker}: tests under tests/{marker}/")
    for domain in ("transform", "url", "browser", "dpr", "responsive", "network", "engine", "config", "cli"):
        config.addinivalue_line("markers", f"{domain}: {domain} domain tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid engine configuration dict for testing."""
    return {
        "organization_name": "acme",
        "default_quality": 80,
        "default_format": "auto",
    }


def minimal_engine_config() -> EngineConfig:
    """Build an EngineConfig from the minimal config dict."""
    return EngineConfig(**minimal_config_dict())


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a copy of the minimal config dict."""
    return minimal_config_dict().copy()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every SNAPKIT_* variable (and prefixed variants) from the environment."""
    for prefix in _ENV_PREFIXES:
        for name in _ENV_VARS:
            monkeypatch.delenv(f"{prefix}{name}", raising=False)
    return monkeypatch


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
