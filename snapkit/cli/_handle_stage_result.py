"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _display_format(ctx: typer.Context | None) -> str:
    """Display format stored by the app callback on the context chain, defaulting to yaml."""
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(
    func: F, ctx: typer.Context | None = None, result_printer: Callable[[dict], None] | None = None
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as JSON or YAML, per ``ctx``)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from snapkit.cli.display.CLIDisplay import CLIDisplay

        _run_single_execution(func, args, kwargs, CLIDisplay(), _display_format(ctx), result_printer)

    return wrapper  # type: ignore[return-value]
