"""The reference command-line host.

Contents:
    * :func:`main` - Run the CLI and return an exit code.
    * :data:`cli` - The root ``rich_click`` group.
    * ``cli_*`` - The individual commands.
    * :class:`ExitCode`, :func:`exit_code_for` - Exit status for each failure kind.
"""

from __future__ import annotations

from .commands import cli_config, cli_greet, cli_info, cli_read, cli_save
from .context import CLIContext, get_cli_context, preserved_traceback_flags, set_traceback
from .exit_codes import ExitCode, exit_code_for
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "ExitCode",
    "cli",
    "cli_config",
    "cli_greet",
    "cli_info",
    "cli_read",
    "cli_save",
    "exit_code_for",
    "get_cli_context",
    "main",
    "preserved_traceback_flags",
    "set_traceback",
]
