from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..responsive._round_half_up import _round_half_up
from ..transform.TransformSet import TransformSet
from ..url.UrlComposer import UrlComposer
from ._request_field_errors import _request_field_errors
from .ValidationError import ValidationError


def create_image_loader(
    organization_name: str,
    transforms: TransformSet | Mapping[str, Any] | None = None,
    unoptimized_format: bool = False,
) -> Callable[..., str]:
    """Build a standalone (src, width, quality) -> url loader for one organization.

    The loader keeps the given transforms and asks the service to pick the
    format, unless unoptimized_format is set, in which case no format is sent.

    Raises:
        ValidationError: If the options are invalid; the returned loader raises
            it too when called with an invalid src, width or quality
    """
    errors: list[str] = []
    if not isinstance(organization_name, str) or not organization_name.strip():
        errors.append("organization_name must be a non-empty string")
    if not isinstance(unoptimized_format, bool):
        errors.append(f"unoptimized_format must be a boolean (found: {type(unoptimized_format).__name__})")
    try:
        base_transforms = TransformSet.coerce(transforms)
    except PydanticValidationError as exc:
        errors.append(f"transforms are invalid ({exc.error_count()} error(s))")
    if errors:
        raise ValidationError(errors)

    composer = UrlComposer(organization_name)
    if unoptimized_format:
        fmt = None
    else:
        fmt = base_transforms.format or "auto"

    def loader(src: str, width: float | None = None, quality: float | None = None) -> str:
        call_errors = _request_field_errors(src, width=width, quality=quality)
        if call_errors:
            raise ValidationError(call_errors)
        if quality is not None:
            quality = _round_half_up(quality)
        return composer.build_transformed_url(
            src, base_transforms.merged(width=width, quality=quality, format=fmt)
        )

    return loader
