"""Config command."""

import typer

from snapkit.api.config.cmd_show import cmd_show
from snapkit.cli._handle_stage_result import _handle_stage_result


def config(
    ctx: typer.Context,
    org: str | None = typer.Option(None, "--org", help="Explicit organization name"),
    strict: bool = typer.Option(False, "--strict", help="Require the organization in the environment"),
) -> None:
    """Show the resolved engine configuration and environment check."""
    _handle_stage_result(cmd_show, ctx)(organization_name=org, strict=strict)
