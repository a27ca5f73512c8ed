"""Browser command."""

import typer

from snapkit.api.browser.cmd_browser import cmd_browser
from snapkit.cli._handle_stage_result import _handle_stage_result


def browser(
    ctx: typer.Context,
    user_agent: str = typer.Argument(..., help="User-Agent header value"),
) -> None:
    """Show browser identity and AVIF/WebP support for a user agent."""
    _handle_stage_result(cmd_browser, ctx)(user_agent)
