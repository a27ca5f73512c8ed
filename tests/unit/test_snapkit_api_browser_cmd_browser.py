"""Unit tests for browser cmd_browser."""

import pytest

from snapkit.api.browser.cmd_browser import cmd_browser
from tests.unit.conftest import SAFARI_IOS_16_4_UA, run_cmd

pytestmark = pytest.mark.browser


def test_reports_browser_and_support():
    result = run_cmd(cmd_browser, SAFARI_IOS_16_4_UA)
    assert result.success
    assert result.output["browser"] == {"name": "safari", "version": 16, "platform": "ios", "ios_version": "16.4"}
    assert result.output["support"] == {"avif": True, "webp": True}
    assert result.output["best_format"] == "avif"
    assert result.output["warnings"] == []


def test_unknown_agent_warns():
    result = run_cmd(cmd_browser, "curl/8.4.0")
    assert result.success
    assert result.output["best_format"] == "jpeg"
    assert result.output["warnings"]
