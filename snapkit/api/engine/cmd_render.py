"""Render image data command."""

from collections.abc import Iterator

from pydantic import ValidationError as PydanticValidationError

from ...utils.templating import render_template
from ..browser.get_format_support_from_ua import get_format_support_from_ua
from ..config.merge_config_with_env import merge_config_with_env
from ..dpr.DprOptions import DprOptions
from ..network.ConnectionInfo import ConnectionInfo
from ..StageResult import StageResult
from ..transform._format_value import _format_value
from ._IMG_TEMPLATE import IMG_TEMPLATE
from .ConfigError import ConfigError
from .ImageEngine import ImageEngine
from .RenderRequest import RenderRequest
from .ValidationError import ValidationError


def cmd_render(
    src: str,
    organization_name: str | None = None,
    width: float | None = None,
    height: float | None = None,
    fill: bool = False,
    sizes: str | None = None,
    quality: float | None = None,
    image_format: str | None = None,
    device_pixel_ratio: float | None = None,
    user_agent: str | None = None,
    effective_type: str | None = None,
    html: bool = False,
    alt: str = "",
) -> StageResult:
    """Compute the URL and srcset for one image.

    The organization and defaults come from the arguments, then the
    environment. image_format overrides the configured default format
    ("off" disables format optimization).
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Resolving configuration...")
        explicit = {"organization_name": organization_name, "default_format": image_format}
        try:
            engine = ImageEngine(merge_config_with_env(explicit))
        except ConfigError as e:
            yield (1.0, "Complete")
            result_obj.result = "Invalid engine configuration"
            result_obj.output = {"errors": e.errors, "warnings": [], "render": {}, "html": None}
            result_obj.success = False
            return

        yield (0.5, "Computing image data...")
        request = RenderRequest(
            src=src,
            width=width,
            height=height,
            fill=fill,
            sizes=sizes,
            quality=quality,
            dpr_options=DprOptions(device_pixel_ratio=device_pixel_ratio),
            connection=ConnectionInfo(effective_type=effective_type) if effective_type else None,
            format_support=get_format_support_from_ua(user_agent) if user_agent else None,
        )
        try:
            data = engine.generate_image_data(request)
        except (ValidationError, PydanticValidationError) as e:
            errors = e.errors if isinstance(e, ValidationError) else [str(e)]
            yield (1.0, "Complete")
            result_obj.result = f"Could not render {src!r}"
            result_obj.output = {"errors": errors, "warnings": [], "render": {}, "html": None}
            result_obj.success = False
            return

        markup = None
        if html:
            yield (0.8, "Rendering markup...")
            markup = render_template(
                IMG_TEMPLATE,
                {
                    "url": data.url,
                    "src_set": data.src_set,
                    "sizes": sizes,
                    "width": _format_value(data.width) if data.width and not fill else None,
                    "height": _format_value(data.height) if data.height and not fill else None,
                    "alt": alt,
                },
            )

        yield (1.0, "Complete")
        result_obj.result = f"Rendered {src}"
        result_obj.output = {"errors": [], "warnings": [], "render": data.to_dict(), "html": markup}
        result_obj.success = True

    return StageResult(announce=f"Rendering image data for {src}...", progress_callback=do_work)
