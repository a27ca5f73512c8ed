"""Unit tests for standalone URL helpers."""

import pytest

from snapkit.api.url.build_image_url import build_image_url
from snapkit.api.url.extract_dimensions_from_url import extract_dimensions_from_url
from snapkit.api.url.is_service_url import is_service_url

pytestmark = pytest.mark.url


class TestBuildImageUrl:
    def test_without_transforms(self):
        assert build_image_url("a.jpg", organization_name="acme") == "https://image-proxy.snapkit.com/image/acme/a.jpg"

    def test_with_transforms(self):
        url = build_image_url("a.jpg", {"width": 50}, organization_name="acme")
        assert url == "https://image-proxy.snapkit.com/image/acme/a.jpg?w=50"

    def test_empty_transforms_are_not_applied(self):
        assert build_image_url("a.jpg", {}, organization_name="acme").endswith("/a.jpg")

    def test_custom_base_url(self):
        url = build_image_url("a.jpg", base_url="https://img.example.com", organization_name="acme")
        assert url == "https://img.example.com/image/acme/a.jpg"


class TestIsServiceUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "https://snapkit.com/a.jpg",
            "https://acme.snapkit.studio/a.jpg",
            "https://x.snapkit-cdn.com/a.jpg",
            "https://image-proxy.snapkit.com/image/acme/a.jpg",
        ],
    )
    def test_service_hosts(self, url):
        assert is_service_url(url)

    @pytest.mark.parametrize("url", ["https://example.com/a.jpg", "https://notsnapkit.com/a.jpg", "a.jpg", ""])
    def test_other_hosts(self, url):
        assert not is_service_url(url)

    def test_unparseable_url(self):
        assert not is_service_url("http://[::1")


class TestExtractDimensionsFromUrl:
    def test_short_keys(self):
        assert extract_dimensions_from_url("https://x.com/a.jpg?w=800&h=600") == (800, 600)

    def test_long_keys(self):
        assert extract_dimensions_from_url("https://x.com/a.jpg?width=300&height=200") == (300, 200)

    def test_missing_height(self):
        assert extract_dimensions_from_url("https://x.com/a.jpg?w=800") is None

    def test_relative_url(self):
        assert extract_dimensions_from_url("/a.jpg?w=800&h=600") is None
