"""Render command."""

import typer

from snapkit.api.engine.cmd_render import cmd_render
from snapkit.cli._handle_stage_result import _handle_stage_result


def render(
    ctx: typer.Context,
    src: str = typer.Argument(..., help="Image path (relative to the organization) or absolute URL"),
    org: str | None = typer.Option(None, "--org", help="Organization name (default: SNAPKIT_ORGANIZATION_NAME)"),
    width: float | None = typer.Option(None, "--width", "-w", help="Logical width in pixels"),
    height: float | None = typer.Option(None, "--height", help="Logical height in pixels"),
    fill: bool = typer.Option(False, "--fill", help="Fill a container of unknown size"),
    sizes: str | None = typer.Option(None, "--sizes", help="CSS sizes expression"),
    quality: float | None = typer.Option(None, "--quality", "-q", help="Quality 1-100"),
    image_format: str | None = typer.Option(None, "--format", "-f", help="Format, 'auto' or 'off'"),
    dpr: float | None = typer.Option(None, "--dpr", help="Device pixel ratio of the client"),
    user_agent: str | None = typer.Option(None, "--user-agent", help="Client User-Agent for format support"),
    ect: str | None = typer.Option(None, "--ect", help="Effective connection type (slow-2g, 2g, 3g, 4g)"),
    html: bool = typer.Option(False, "--html", help="Also render an <img> tag"),
    alt: str = typer.Option("", "--alt", help="Alt text for --html"),
) -> None:
    """Compute the optimized URL and srcset for an image."""
    _handle_stage_result(cmd_render, ctx)(
        src,
        organization_name=org,
        width=width,
        height=height,
        fill=fill,
        sizes=sizes,
        quality=quality,
        image_format=image_format,
        device_pixel_ratio=dpr,
        user_agent=user_agent,
        effective_type=ect,
        html=html,
        alt=alt,
    )
