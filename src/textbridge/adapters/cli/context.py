"""Per-invocation state shared between the root group and its commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from textbridge.composition import AppServices


@dataclass(frozen=True, slots=True)
class CLIContext:
    """What the root group resolved: wired services, effective config and profile."""

    services: AppServices
    config: Config
    profile: str | None = None
    traceback: bool = False


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` the root group stored on ``ctx.obj``.

    Raises:
        RuntimeError: If a command runs without the root group.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("textbridge commands must run under the root group")
    return ctx.obj


def set_traceback(enabled: bool) -> None:
    """Make lib_cli_exit_tools print full, colored tracebacks, or summaries.

    Example:
        >>> with preserved_traceback_flags():
        ...     set_traceback(True)
        ...     lib_cli_exit_tools.config.traceback
        True
    """
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


@contextmanager
def preserved_traceback_flags() -> Iterator[None]:
    """Undo any :func:`set_traceback` made inside the block."""
    config = lib_cli_exit_tools.config
    saved = (config.traceback, config.traceback_force_color)
    try:
        yield
    finally:
        config.traceback, config.traceback_force_color = saved


__all__ = ["CLIContext", "get_cli_context", "preserved_traceback_flags", "set_traceback"]
