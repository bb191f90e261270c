"""Run the command line and turn every outcome into an exit code.

Contents:
    * :func:`main` - Used by the console script and ``python -m textbridge``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from textbridge import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import preserved_traceback_flags
from .root import cli

if TYPE_CHECKING:
    from textbridge.composition import AppServices


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # Commands already reported the failure on stderr.
        return lib_cli_exit_tools.get_system_exit_code(exc)
    except BaseException as exc:
        verbose = bool(lib_cli_exit_tools.config.traceback)
        lib_cli_exit_tools.print_exception_message(
            trace_back=verbose,
            length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
        )
        return lib_cli_exit_tools.get_system_exit_code(exc)
    return 0


def main(argv: Sequence[str] | None = None, *, services_factory: Callable[[], AppServices]) -> int:
    """Run ``textbridge`` with ``argv`` (default ``sys.argv[1:]``) and return its exit code.

    ``services_factory`` is handed to the root group, which calls it once;
    entry points pass ``build_production``. Traceback flags are restored and,
    on the main thread, lib_log_rich is shut down before returning.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    with preserved_traceback_flags():
        try:
            return _invoke(args, services_factory)
        finally:
            if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
                lib_log_rich.runtime.shutdown()


__all__ = ["main"]
