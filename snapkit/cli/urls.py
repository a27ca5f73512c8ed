"""Format URLs command."""

import typer

from snapkit.api.url.cmd_urls import cmd_urls
from snapkit.cli._handle_stage_result import _handle_stage_result


def urls(
    ctx: typer.Context,
    src: str = typer.Argument(..., help="Image path (relative to the organization) or absolute URL"),
    org: str | None = typer.Option(None, "--org", help="Organization name (default: SNAPKIT_ORGANIZATION_NAME)"),
    width: float | None = typer.Option(None, "--width", "-w", help="Width in pixels"),
    quality: int | None = typer.Option(None, "--quality", "-q", help="Quality 1-100"),
) -> None:
    """Show AVIF, WebP and original-format URLs for an image."""
    _handle_stage_result(cmd_urls, ctx)(src, organization_name=org, width=width, quality=quality)
