"""POSIX-conventional exit codes for CLI error paths.

Provides a single :class:`ExitCode` enum so every ``SystemExit`` raised by a
CLI command carries a meaningful integer, plus the mapping from a file
failure kind to its code.

Signal codes (130, 141, 143) are informational only; ``lib_cli_exit_tools``
handles signal-to-exit-code translation.

Contents:
    * :class:`ExitCode`: IntEnum of all exit codes used by this application.
    * :func:`exit_code_for`: exit code for an :class:`IOErrorKind`.
"""

from __future__ import annotations

from enum import IntEnum

from textbridge.domain.enums import IOErrorKind


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    Values follow sysexits.h and errno conventions where applicable:

    * 0-1: generic success / failure
    * 2, 13, 22, 28: errno-derived codes (ENOENT, EACCES, EINVAL, ENOSPC)
    * 65, 74, 78: EX_DATAERR, EX_IOERR, EX_CONFIG (sysexits.h)
    * 128+N: signal N (informational only)

    Example:
        >>> int(ExitCode.FILE_NOT_FOUND)
        2
        >>> int(ExitCode.INVALID_TEXT)
        65
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    STORAGE_FULL = 28
    INVALID_TEXT = 65
    IO_ERROR = 74
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


_KIND_EXIT_CODES: dict[IOErrorKind, ExitCode] = {
    IOErrorKind.NOT_FOUND: ExitCode.FILE_NOT_FOUND,
    IOErrorKind.NO_SUCH_DIRECTORY: ExitCode.FILE_NOT_FOUND,
    IOErrorKind.PERMISSION_DENIED: ExitCode.PERMISSION_DENIED,
    IOErrorKind.INVALID_TEXT: ExitCode.INVALID_TEXT,
    IOErrorKind.STORAGE_FULL: ExitCode.STORAGE_FULL,
    IOErrorKind.OTHER: ExitCode.IO_ERROR,
}


def exit_code_for(kind: IOErrorKind) -> ExitCode:
    """Return the exit code reported for a failed read or write.

    Example:
        >>> exit_code_for(IOErrorKind.PERMISSION_DENIED)
        <ExitCode.PERMISSION_DENIED: 13>
    """
    return _KIND_EXIT_CODES[kind]


__all__ = ["ExitCode", "exit_code_for"]
