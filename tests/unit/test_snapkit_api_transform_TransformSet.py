"""Unit tests for the TransformSet model."""

import pytest
from pydantic import ValidationError

from snapkit.api.transform.Extract import Extract
from snapkit.api.transform.TransformSet import IMAGE_FORMATS, TransformSet

pytestmark = pytest.mark.transform


def test_empty_set_has_no_fields():
    transforms = TransformSet()
    assert transforms.model_dump(exclude_none=True) == {}


def test_coerce_none_returns_empty_set():
    assert TransformSet.coerce(None) == TransformSet()


def test_coerce_returns_same_instance():
    transforms = TransformSet(width=100)
    assert TransformSet.coerce(transforms) is transforms


def test_coerce_mapping_builds_nested_extract():
    transforms = TransformSet.coerce({"width": 300, "extract": {"x": 25, "y": 10, "width": 50, "height": 75}})
    assert transforms.width == 300
    assert transforms.extract == Extract(x=25, y=10, width=50, height=75)


def test_unknown_keys_are_kept_as_custom_fields():
    transforms = TransformSet.coerce({"sharpen": 2, "tags": ["a", "b"]})
    assert transforms.model_extra == {"sharpen": 2, "tags": ["a", "b"]}


@pytest.mark.parametrize("quality", [0, 101])
def test_quality_out_of_range_is_rejected(quality):
    with pytest.raises(ValidationError):
        TransformSet(quality=quality)


def test_unknown_format_is_rejected():
    with pytest.raises(ValidationError):
        TransformSet(format="gif")


def test_unknown_fit_is_rejected():
    with pytest.raises(ValidationError):
        TransformSet(fit="stretch")


def test_extract_percentages_are_bounded():
    with pytest.raises(ValidationError):
        Extract(x=0, y=0, width=120, height=50)


def test_merged_replaces_fields_and_leaves_original_alone():
    base = TransformSet(width=100, blur=5)
    merged = base.merged(width=200, format="webp")
    assert merged.width == 200
    assert merged.blur == 5
    assert merged.format == "webp"
    assert base.width == 100
    assert base.format is None


def test_merged_none_clears_field():
    assert TransformSet(format="avif").merged(format=None).format is None


def test_image_formats_exclude_sentinels():
    assert "auto" not in IMAGE_FORMATS
    assert "off" not in IMAGE_FORMATS
    assert set(IMAGE_FORMATS) == {"jpeg", "jpg", "png", "webp", "avif"}
