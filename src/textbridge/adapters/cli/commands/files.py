"""Whole-file read and save CLI commands.

Both commands move file content through the process's binary streams, so
bytes reach stdout, and come in from stdin, exactly as stored: no newline
translation, no ANSI stripping, always UTF-8.

Contents:
    * :func:`cli_read` - Print a file's text to stdout.
    * :func:`cli_save` - Write text from an option or stdin to a file.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, NoReturn, cast

import lib_log_rich.runtime
import rich_click as click
from click import get_binary_stream

from textbridge.adapters.filesystem.text_io import TEXT_ENCODING
from textbridge.domain.enums import FileOperation
from textbridge.domain.errors import ConfigurationError, TextFileError, wrap_io_error

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode, exit_code_for

logger = logging.getLogger(__name__)


def _fail_with(exc: TextFileError) -> NoReturn:
    """Report a file failure on stderr and exit with its mapped code."""
    logger.error(
        "File operation failed",
        extra={"operation": exc.operation.value, "path": exc.path, "kind": exc.kind.value, "error": exc.detail},
    )
    click.echo(f"Error: {exc}", err=True)
    raise SystemExit(exit_code_for(exc.kind)) from exc


def _resolve_fsync(cli_ctx: CLIContext, fsync: bool | None) -> bool:
    """Return the ``--fsync`` flag when given, else ``[files] fsync`` from config."""
    if fsync is not None:
        return fsync
    raw: object = cli_ctx.config.get("files", default={})
    try:
        if not isinstance(raw, Mapping):
            raise ConfigurationError(f"[files] must be a table, got {type(raw).__name__}")
        settings = cli_ctx.services.load_file_settings(cast("Mapping[str, Any]", raw))
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    return settings.fsync


def _read_stdin_text(path: str) -> str:
    """Decode all of stdin as UTF-8; undecodable input fails the save as invalid text."""
    data = get_binary_stream("stdin").read()
    try:
        return data.decode(TEXT_ENCODING)
    except UnicodeDecodeError as exc:
        _fail_with(wrap_io_error(exc, FileOperation.WRITE, path))


@click.command("read", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("path", type=click.Path(dir_okay=True, path_type=str))
@click.pass_context
def cli_read(ctx: click.Context, path: str) -> None:
    """Print the full text of PATH to stdout, unchanged.

    Exit codes: 2 not found, 13 permission denied, 65 not valid UTF-8,
    74 other I/O failure.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-read", extra={"command": "read", "path": path}):
        logger.info("Reading file", extra={"path": path})
        try:
            content = cli_ctx.services.read_text_file(path)
        except TextFileError as exc:
            _fail_with(exc)
        stdout = get_binary_stream("stdout")
        stdout.write(content.encode(TEXT_ENCODING))
        stdout.flush()


@click.command("save", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("path", type=click.Path(dir_okay=True, path_type=str))
@click.option(
    "--content",
    type=str,
    default=None,
    help="Text to write. Read from stdin as UTF-8 when omitted.",
)
@click.option(
    "--fsync/--no-fsync",
    default=None,
    help="Sync to stable storage before returning. Default: [files] fsync from config.",
)
@click.pass_context
def cli_save(ctx: click.Context, path: str, content: str | None, fsync: bool | None) -> None:
    r"""Create or replace PATH with the given text.

    Existing contents are overwritten, never appended to. Parent
    directories are not created.

    \b
    Exit codes: 2 missing directory, 13 permission denied,
    28 storage full, 65 stdin not valid UTF-8, 74 other I/O failure.
    """
    cli_ctx = get_cli_context(ctx)
    effective_fsync = _resolve_fsync(cli_ctx, fsync)
    text = content if content is not None else _read_stdin_text(path)

    extra = {"command": "save", "path": path, "fsync": effective_fsync}
    with lib_log_rich.runtime.bind(job_id="cli-save", extra=extra):
        logger.info("Saving file", extra={"path": path, "chars": len(text), "fsync": effective_fsync})
        try:
            cli_ctx.services.write_text_file(path, text, fsync=effective_fsync)
        except TextFileError as exc:
            _fail_with(exc)


__all__ = ["cli_read", "cli_save"]
