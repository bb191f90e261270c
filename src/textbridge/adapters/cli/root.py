"""The ``textbridge`` command group.

The group resolves everything the commands share, once per invocation: the
wired services, the configuration for ``--profile`` with ``--set`` applied,
the lib_log_rich runtime and the traceback preference.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from textbridge import __init__conf__
from textbridge.adapters.config.overrides import apply_overrides

from .commands import cli_config, cli_greet, cli_info, cli_read, cli_save
from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, set_traceback

if TYPE_CHECKING:
    from textbridge.composition import AppServices


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    try:
        return apply_overrides(services.get_config(profile=profile), set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Show the full Python traceback on unexpected errors.")
@click.option("--profile", default=None, help="Read configuration from the named profile, e.g. 'staging'.")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value, e.g. files.fsync=true. Repeatable.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Greet, read and save text files from the shell."""
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("cli needs obj=<services factory>; use textbridge.entry.main")
    services: AppServices = factory()
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    set_traceback(traceback)
    ctx.obj = CLIContext(services=services, config=config, profile=profile, traceback=traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in (cli_info, cli_greet, cli_read, cli_save, cli_config):
    cli.add_command(_command)


__all__ = ["cli"]
