"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

import errno

from .enums import FileOperation, IOErrorKind

_STORAGE_FULL_ERRNOS = frozenset({errno.ENOSPC, getattr(errno, "EDQUOT", errno.ENOSPC)})


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration section cannot be parsed into its model.
    Typically caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> from textbridge.domain.errors import ConfigurationError
        >>> err = ConfigurationError("[files] fsync must be a boolean")
        >>> str(err)
        '[files] fsync must be a boolean'
    """


class TextFileError(OSError):
    """A whole-file read or write failed.

    The single failure type of the file/text service. Subclasses ``OSError``
    so hosts that already catch ``OSError`` keep working; ``errno``,
    ``strerror`` and ``filename`` are filled from the underlying platform
    error when one exists.

    Attributes:
        kind: Classified cause of the failure.
        operation: Whether a read or a write failed.
        path: The path as given by the caller, as text.
        detail: Platform description of the failure.

    Example:
        >>> err = TextFileError(IOErrorKind.NOT_FOUND, FileOperation.READ, "a.txt", "No such file or directory")
        >>> str(err)
        "cannot read 'a.txt': No such file or directory (not-found)"
        >>> isinstance(err, OSError)
        True
    """

    def __init__(
        self,
        kind: IOErrorKind,
        operation: FileOperation,
        path: str,
        detail: str,
        errno_code: int | None = None,
    ) -> None:
        if errno_code is not None:
            super().__init__(errno_code, detail, path)
        else:
            super().__init__(detail)
        self.kind = kind
        self.operation = operation
        self.path = path
        self.detail = detail

    def __str__(self) -> str:
        return f"cannot {self.operation.value} {self.path!r}: {self.detail} ({self.kind.value})"

    def __reduce__(self) -> tuple[type[TextFileError], tuple[IOErrorKind, FileOperation, str, str, int | None]]:
        # OSError's default reduce replays (errno, strerror, filename) into __init__.
        return type(self), (self.kind, self.operation, self.path, self.detail, self.errno)


def classify_io_error(exc: BaseException, operation: FileOperation) -> IOErrorKind:
    """Map a platform failure onto an :class:`IOErrorKind`.

    A missing path means "not found" for reads but "no such directory" for
    writes, since creating the file only fails that way when a parent is
    missing.

    Args:
        exc: Exception raised by the filesystem primitive or the decoder.
        operation: The operation that raised it.

    Returns:
        The classified kind; :attr:`IOErrorKind.OTHER` when nothing matches.

    Example:
        >>> classify_io_error(FileNotFoundError(2, "gone"), FileOperation.READ)
        <IOErrorKind.NOT_FOUND: 'not-found'>
        >>> classify_io_error(FileNotFoundError(2, "gone"), FileOperation.WRITE)
        <IOErrorKind.NO_SUCH_DIRECTORY: 'no-such-directory'>
        >>> classify_io_error(OSError(errno.ENOSPC, "full"), FileOperation.WRITE)
        <IOErrorKind.STORAGE_FULL: 'storage-full'>
        >>> classify_io_error(ValueError("embedded null byte"), FileOperation.READ)
        <IOErrorKind.OTHER: 'other'>
    """
    if isinstance(exc, UnicodeError):
        return IOErrorKind.INVALID_TEXT
    if isinstance(exc, FileNotFoundError):
        if operation is FileOperation.WRITE:
            return IOErrorKind.NO_SUCH_DIRECTORY
        return IOErrorKind.NOT_FOUND
    if isinstance(exc, PermissionError):
        return IOErrorKind.PERMISSION_DENIED
    if isinstance(exc, OSError) and exc.errno in _STORAGE_FULL_ERRNOS:
        return IOErrorKind.STORAGE_FULL
    return IOErrorKind.OTHER


def wrap_io_error(exc: BaseException, operation: FileOperation, path: str) -> TextFileError:
    """Build the :class:`TextFileError` describing ``exc``.

    Callers raise the result ``from exc`` so the original stays chained.

    Example:
        >>> err = wrap_io_error(PermissionError(13, "Permission denied"), FileOperation.WRITE, "/etc/x")
        >>> err.kind.value, err.errno
        ('permission-denied', 13)
    """
    kind = classify_io_error(exc, operation)
    if isinstance(exc, OSError):
        detail = exc.strerror or str(exc)
        return TextFileError(kind, operation, path, detail, errno_code=exc.errno)
    return TextFileError(kind, operation, path, str(exc))


__all__ = [
    "ConfigurationError",
    "TextFileError",
    "classify_io_error",
    "wrap_io_error",
]
