"""Format variant URLs command."""

from collections.abc import Iterator

from pydantic import ValidationError as PydanticValidationError

from ..config.merge_config_with_env import merge_config_with_env
from ..engine.ConfigError import ConfigError
from ..StageResult import StageResult
from ..transform.TransformSet import TransformSet
from .UrlComposer import UrlComposer


def cmd_urls(
    src: str,
    organization_name: str | None = None,
    width: float | None = None,
    quality: int | None = None,
) -> StageResult:
    """Build the AVIF, WebP and original-format URLs for one image."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Resolving organization...")
        errors: list[str] = []
        urls: dict = {}
        try:
            config = merge_config_with_env({"organization_name": organization_name})
            transforms = TransformSet(width=width, quality=quality)
        except ConfigError as e:
            errors.extend(e.errors)
        except PydanticValidationError as e:
            errors.extend(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())

        if not errors:
            yield (0.7, "Composing URLs...")
            composer = UrlComposer(config.organization_name)
            format_urls = composer.build_format_urls(src, transforms)
            urls = {"avif": format_urls.avif, "webp": format_urls.webp, "original": format_urls.original}

        yield (1.0, "Complete")
        result_obj.success = not errors
        result_obj.result = f"Built format URLs for {src}" if result_obj.success else f"Could not build URLs for {src!r}"
        result_obj.output = {"errors": errors, "warnings": [], "urls": urls}

    return StageResult(announce=f"Building format URLs for {src}...", progress_callback=do_work)
