"""Image-service URL composition."""

from .build_image_url import build_image_url
from .extract_dimensions_from_url import extract_dimensions_from_url
from .FormatUrls import FormatUrls
from .is_service_url import is_service_url
from .UrlComposer import DEFAULT_BASE_URL, UrlComposer

__all__ = [
    "DEFAULT_BASE_URL",
    "FormatUrls",
    "UrlComposer",
    "build_image_url",
    "extract_dimensions_from_url",
    "is_service_url",
]
