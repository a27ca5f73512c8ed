from ..transform.serialize_transforms import serialize_transforms
from .UrlComposer import DEFAULT_BASE_URL, TransformsLike, UrlComposer


def build_image_url(
    src: str,
    transforms: TransformsLike = None,
    base_url: str | None = None,
    organization_name: str | None = None,
) -> str:
    """Build one image URL without keeping a shared composer around.

    Transforms are applied only when they serialize to something.
    """
    composer = UrlComposer(organization_name or "", base_url or DEFAULT_BASE_URL)
    if transforms is not None and serialize_transforms(transforms):
        return composer.build_transformed_url(src, transforms)
    return composer.build_image_url(src)
