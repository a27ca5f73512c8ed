"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
"""

import pytest

# Re-export commonly used helpers from root conftest
from tests.conftest import (
    FakeClock,
    minimal_config_dict,
    minimal_engine_config,
    run_cmd,
)
from snapkit.api.engine.ImageEngine import ImageEngine

__all__ = [
    "FakeClock",
    "minimal_config_dict",
    "minimal_engine_config",
    "run_cmd",
]

CHROME_DESKTOP_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
SAFARI_IOS_16_4_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 16_4 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/16.4 Mobile/15E148 Safari/604.1"
)


@pytest.fixture
def engine() -> ImageEngine:
    return ImageEngine(minimal_engine_config())
