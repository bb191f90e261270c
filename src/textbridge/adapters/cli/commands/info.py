"""Metadata and greeting CLI commands.

Contents:
    * :func:`cli_info` - Display package metadata.
    * :func:`cli_greet` - Print the greeting for a name.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from textbridge import __init__conf__
from textbridge.domain.behaviors import build_greeting

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
def cli_greet(name: str) -> None:
    """Print ``Hello, NAME!``; any text, including an empty NAME, is accepted."""
    with lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet"}):
        logger.info("Executing greet command")
        click.echo(build_greeting(name))


__all__ = ["cli_greet", "cli_info"]
