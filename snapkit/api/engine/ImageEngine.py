"""Image delivery engine: turns a render request into URLs and a srcset."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..dpr.get_optimal_dpr_values import get_optimal_dpr_values
from ..network.adjust_quality_for_connection import adjust_quality_for_connection
from ..responsive._round_half_up import _round_half_up
from ..responsive.generate_responsive_widths import generate_responsive_widths
from ..responsive.parse_image_sizes import parse_image_sizes
from ..transform.FormatChoice import FormatChoice
from ..transform.TransformSet import TransformSet
from ..url.UrlComposer import UrlComposer
from ._request_field_errors import _request_field_errors
from .EngineConfig import EngineConfig
from .RenderData import RenderData
from .RenderRequest import RenderRequest
from .ValidationError import ValidationError
from .ValidationResult import ValidationResult

logger = logging.getLogger(__name__)

# Logical width used when the image fills a container of unknown size
FILL_MODE_WIDTH = 1920
# Denser ladder for sizes-driven srcsets: covers 1x, 1.5x and 2x screens per slot
SIZES_MULTIPLIERS: tuple[float, ...] = (1, 1.5, 2)

ImageSize = tuple[float | None, float | None]


class ImageEngine:
    """Framework-independent image optimization engine.

    Built once per organization from an EngineConfig (or a mapping with the
    same keys), then asked for RenderData per image instance. Holds no
    per-request state.
    """

    def __init__(self, config: EngineConfig | Mapping[str, Any]):
        """Initialize the engine.

        Raises:
            ConfigError: If the configuration is invalid
        """
        if not isinstance(config, EngineConfig):
            config = EngineConfig.from_dict(config)
        self.config = config
        self._url_composer = UrlComposer(config.organization_name)

    def __repr__(self) -> str:
        return f"ImageEngine(organization_name={self.config.organization_name!r})"

    @property
    def url_composer(self) -> UrlComposer:
        """Composer bound to this engine's organization."""
        return self._url_composer

    def get_config(self) -> EngineConfig:
        return self.config

    def validate_params(self, request: RenderRequest) -> ValidationResult:
        """Check a request, collecting all violations instead of stopping at the first."""
        errors = _request_field_errors(request.src, request.width, request.height, request.quality)

        try:
            TransformSet.coerce(request.transforms)
        except PydanticValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
            )
            errors.append(f"transforms are invalid ({details})")

        return ValidationResult(is_valid=not errors, errors=errors)

    def generate_image_data(self, request: RenderRequest) -> RenderData:
        """Compute the main URL, srcset, size and final transforms for one image.

        Raises:
            ValidationError: If the request fails validation
        """
        validation = self.validate_params(request)
        if not validation.is_valid:
            raise ValidationError(validation.errors)

        base_quality = request.quality or self.config.default_quality
        if request.adjust_quality_by_network:
            adjusted = adjust_quality_for_connection(base_quality, connection=request.connection)
        else:
            adjusted = base_quality
        adjusted_quality = _round_half_up(adjusted)

        image_size = self._calculate_image_size(request)
        final_transforms = self._create_final_transforms(request, adjusted_quality, image_size)

        url = self._url_composer.build_transformed_url(request.src, final_transforms)
        src_set = self._generate_src_set(request, image_size, final_transforms)

        return RenderData(
            url=url,
            src_set=src_set,
            size=image_size,
            transforms=final_transforms,
            adjusted_quality=adjusted_quality,
        )

    def _calculate_image_size(self, request: RenderRequest) -> ImageSize:
        if request.fill:
            return (FILL_MODE_WIDTH, None)
        return (request.width, request.height)

    def _resolve_format(self, request: RenderRequest, transforms: TransformSet) -> str | None:
        choice = FormatChoice.parse(transforms.format or self.config.default_format)
        return choice.resolve(request.format_support)

    def _create_final_transforms(
        self,
        request: RenderRequest,
        adjusted_quality: int,
        image_size: ImageSize,
    ) -> TransformSet:
        transforms = TransformSet.coerce(request.transforms)
        return transforms.merged(
            width=image_size[0],
            height=image_size[1],
            quality=adjusted_quality,
            format=self._resolve_format(request, transforms),
        )

    def _generate_src_set(
        self,
        request: RenderRequest,
        image_size: ImageSize,
        final_transforms: TransformSet,
    ) -> str:
        width, height = image_size

        if request.fill:
            logger.debug(f"Fill mode srcset for {request.src} from width {width}")
            return self._url_composer.build_src_set(
                request.src, generate_responsive_widths(width), final_transforms
            )

        if request.sizes:
            parsed_sizes = parse_image_sizes(request.sizes)
            if parsed_sizes:
                widths: set[int] = set()
                for size in parsed_sizes:
                    widths.update(generate_responsive_widths(size, multipliers=SIZES_MULTIPLIERS))
                logger.debug(f"Sizes srcset for {request.src}: {len(widths)} width(s)")
                return self._url_composer.build_src_set(request.src, sorted(widths), final_transforms)

            logger.warning(f"Could not parse sizes {request.sizes!r}; using the default width ladder")
            if not width:
                return ""
            return self._url_composer.build_src_set(
                request.src, generate_responsive_widths(width), final_transforms
            )

        if not width:
            return ""

        dprs = get_optimal_dpr_values(request.dpr_options)
        logger.debug(f"DPR srcset for {request.src}: {dprs}")
        return self._url_composer.build_dpr_src_set(request.src, width, height, final_transforms, dprs)

    def create_loader(self) -> Callable[..., str]:
        """Return a (src, width, quality) -> url adapter.

        Network adjustment is disabled: the host is expected to have resolved
        network conditions before asking for a URL.
        """

        def loader(src: str, width: float | None = None, quality: float | None = None) -> str:
            request = RenderRequest(src=src, width=width, quality=quality, adjust_quality_by_network=False)
            return self.generate_image_data(request).url

        return loader
