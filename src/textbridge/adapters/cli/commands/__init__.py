"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info and greeting commands from :mod:`.info`
    * File read/save commands from :mod:`.files`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .files import cli_read, cli_save
from .info import cli_greet, cli_info

__all__ = [
    "cli_config",
    "cli_greet",
    "cli_info",
    "cli_read",
    "cli_save",
]
