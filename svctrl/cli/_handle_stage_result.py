"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import typer

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _context_value(ctx: typer.Context | None, key: str, default: Any = None) -> Any:
    """Find ``key`` in the ``obj`` dict of ``ctx`` or one of its parents."""
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and key in obj:
            return obj[key]
        current = current.parent
    return default


def _handle_stage_result(func: F, ctx: typer.Context | None = None) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress
    3. Result (print to stderr)
    4. Output (print to stdout as YAML or JSON)

    Args:
        func: Function that returns StageResult
        ctx: Context of the invoked command; the display format is read from its chain
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from svctrl.cli.display.display_context import display_context

        display = display_context.get_display("cli")
        display_format = _context_value(ctx, "display_format", "yaml")
        if display_format not in ("json", "yaml"):
            display_format = "yaml"

        _run_single_execution(func, args, kwargs, display, display_format)

    return wrapper  # type: ignore[return-value]
