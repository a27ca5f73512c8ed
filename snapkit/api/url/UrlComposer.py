"""Compose absolute image-service URLs."""

from collections.abc import Iterable, Mapping
from typing import Any

from ..transform._format_value import _format_value
from ..transform.serialize_transforms import serialize_transforms
from ..transform.TransformSet import TransformSet
from .FormatUrls import FormatUrls

DEFAULT_BASE_URL = "https://image-proxy.snapkit.com"
DEFAULT_RESOURCE_ROOT = "image"

TransformsLike = TransformSet | Mapping[str, Any] | None


def _is_absolute(path: str) -> bool:
    return path.startswith("http://") or path.startswith("https://")


class UrlComposer:
    """Builds {base}/{resource-root}/{organization}{path}?{query} URLs."""

    def __init__(
        self,
        organization_name: str = "",
        base_url: str = DEFAULT_BASE_URL,
        resource_root: str = DEFAULT_RESOURCE_ROOT,
    ):
        self.organization_name = organization_name
        self.base_url = base_url.rstrip("/")
        self.resource_root = resource_root.strip("/")

    def __repr__(self) -> str:
        return f"UrlComposer(organization_name={self.organization_name!r}, base_url={self.base_url!r})"

    def build_image_url(self, path: str, organization_name: str | None = None) -> str:
        """Return the untransformed URL for path.

        Absolute http(s) URLs are returned unchanged; relative paths get exactly
        one leading slash and are placed under the organization root.
        """
        if _is_absolute(path):
            return path

        org = self.organization_name if organization_name is None else organization_name
        normalized = "/" + path.lstrip("/")
        return f"{self.base_url}/{self.resource_root}/{org}{normalized}"

    def build_transformed_url(
        self,
        path: str,
        transforms: TransformsLike,
        organization_name: str | None = None,
    ) -> str:
        """Return the URL for path with the transform query appended.

        A path that already carries a query string is extended with '&'.
        """
        url = self.build_image_url(path, organization_name)
        query = serialize_transforms(transforms)
        if not query:
            return url

        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{query}"

    def build_format_urls(
        self,
        path: str,
        transforms: TransformsLike,
        organization_name: str | None = None,
    ) -> FormatUrls:
        """Return AVIF, WebP and format-stripped variants of one transform set."""
        base = TransformSet.coerce(transforms)
        return FormatUrls(
            avif=self.build_transformed_url(path, base.merged(format="avif"), organization_name),
            webp=self.build_transformed_url(path, base.merged(format="webp"), organization_name),
            original=self.build_transformed_url(path, base.merged(format=None), organization_name),
        )

    def build_src_set(
        self,
        path: str,
        widths: Iterable[int],
        transforms: TransformsLike,
        organization_name: str | None = None,
    ) -> str:
        """Return a width-descriptor srcset ("url 400w, url 800w")."""
        base = TransformSet.coerce(transforms)
        entries = []
        for width in widths:
            url = self.build_transformed_url(path, base.merged(width=width), organization_name)
            entries.append(f"{url} {_format_value(width)}w")
        return ", ".join(entries)

    def build_dpr_src_set(
        self,
        path: str,
        width: int | float,
        height: int | float | None,
        transforms: TransformsLike,
        dprs: Iterable[float],
        organization_name: str | None = None,
    ) -> str:
        """Return a density-descriptor srcset ("url 1x, url 2x").

        Width and height stay fixed across entries; only dpr varies.
        """
        base = TransformSet.coerce(transforms).merged(width=width, height=height)
        entries = []
        for dpr in dprs:
            url = self.build_transformed_url(path, base.merged(dpr=dpr), organization_name)
            entries.append(f"{url} {_format_value(dpr)}x")
        return ", ".join(entries)
