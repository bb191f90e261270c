"""``textbridge config``: print the configuration the other commands see."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from textbridge.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Render as TOML-like text or as JSON.",
)
@click.option("--section", default=None, help="Only show this section, e.g. 'files'.")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None) -> None:
    """Show the merged configuration, including --profile and --set.

    Precedence: defaults -> app -> host -> user -> dotenv -> env -> --set
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "profile": cli_ctx.profile}):
        logger.info("Displaying configuration", extra={"format": fmt.value, "section": section})
        try:
            cli_ctx.services.display_config(cli_ctx.config, output_format=fmt, section=section, profile=cli_ctx.profile)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
