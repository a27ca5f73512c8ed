"""Unit tests for pixel-density ladder selection."""

import pytest

from snapkit.api.dpr.DprOptions import DprOptions
from snapkit.api.dpr.get_optimal_dpr_values import get_optimal_dpr_values

pytestmark = pytest.mark.dpr


def test_default_options_use_standard_ladder():
    assert get_optimal_dpr_values() == [1, 2, 3]
    assert get_optimal_dpr_values(DprOptions()) == [1, 2, 3]


def test_force_dpr_wins():
    assert get_optimal_dpr_values(DprOptions(force_dpr=2, custom_dprs=[1, 3])) == [2]


def test_custom_dprs_are_filtered_and_sorted():
    assert get_optimal_dpr_values(DprOptions(custom_dprs=[1, 2, 3, 4], max_dpr=2)) == [1, 2]
    assert get_optimal_dpr_values(DprOptions(custom_dprs=[3, 0, 1.5, -1])) == [1.5, 3]


def test_auto_detect_off_uses_capped_standard_ladder():
    assert get_optimal_dpr_values(DprOptions(auto_detect=False, device_pixel_ratio=1, max_dpr=2)) == [1, 2]


def test_unknown_device_respects_max_dpr():
    assert get_optimal_dpr_values(DprOptions(max_dpr=1)) == [1]


@pytest.mark.parametrize(
    "device_dpr, expected",
    [
        (1, [1]),
        (1.25, [1, 1.5]),
        (1.5, [1, 1.5]),
        (2, [1, 2]),
        (2.5, [1, 2]),
        (2.6, [1, 2]),
        (3, [1, 2, 3]),
    ],
)
def test_device_ratio_ladder(device_dpr, expected):
    assert get_optimal_dpr_values(DprOptions(device_pixel_ratio=device_dpr)) == expected


def test_high_density_device_capped_by_max_dpr():
    assert get_optimal_dpr_values(DprOptions(device_pixel_ratio=3, max_dpr=2)) == [1, 2]
