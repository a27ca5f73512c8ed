"""Per-render input."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..browser.FormatSupport import FormatSupport
from ..dpr.DprOptions import DprOptions
from ..network.ConnectionInfo import ConnectionInfo
from ..transform.TransformSet import TransformSet


@dataclass
class RenderRequest:
    """Caller input for one image instance. Validated by ImageEngine, never stored."""

    src: str
    width: float | None = None
    height: float | None = None
    fill: bool = False
    sizes: str | None = None
    quality: float | None = None
    transforms: TransformSet | Mapping[str, Any] | None = None
    adjust_quality_by_network: bool = True
    dpr_options: DprOptions | None = None
    connection: ConnectionInfo | None = None
    format_support: FormatSupport | None = None
