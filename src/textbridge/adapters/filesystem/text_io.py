"""Whole-file text read and write on the host filesystem.

Files are handled as raw bytes and decoded/encoded as UTF-8, so content
round-trips exactly: no newline translation, no BOM stripping, no locale
dependent encoding.

Contents:
    * :data:`TEXT_ENCODING` - Encoding used for every file.
    * :func:`read_text_file` - Read a whole file as text.
    * :func:`write_text_file` - Create or replace a file with text.

System Role:
    Production implementation of the ``ReadTextFile`` and ``WriteTextFile``
    ports. Every platform failure leaves this module as a
    :class:`~textbridge.domain.errors.TextFileError` chained to the original.
"""

from __future__ import annotations

import logging
import os

from textbridge.domain.enums import FileOperation
from textbridge.domain.errors import wrap_io_error

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-8"


def read_text_file(path: str | os.PathLike[str]) -> str:
    """Return the entire contents of ``path`` decoded as text.

    The file handle is closed before returning, on success and on failure.
    Reading never creates the file.

    Args:
        path: Location to read. Interpreted by the platform as-is.

    Returns:
        The full decoded contents.

    Raises:
        TextFileError: When the path is unusable, the file cannot be opened
            or read, or its bytes are not valid UTF-8.

    Example:
        >>> import tempfile, pathlib
        >>> target = pathlib.Path(tempfile.mkdtemp()) / "note.txt"
        >>> _ = target.write_bytes(b"line one\\nline two")
        >>> read_text_file(target)
        'line one\\nline two'
    """
    location = os.fspath(path)
    try:
        with open(location, "rb") as handle:
            data = handle.read()
        text = data.decode(TEXT_ENCODING)
    except (OSError, ValueError) as exc:  # ValueError: undecodable bytes or a NUL in the path
        error = wrap_io_error(exc, FileOperation.READ, location)
        logger.debug("Reading file failed", extra={"path": location, "kind": error.kind.value})
        raise error from exc
    logger.debug("Read file", extra={"path": location, "bytes": len(data)})
    return text


def write_text_file(path: str | os.PathLike[str], content: str, *, fsync: bool = False) -> None:
    """Create or truncate ``path`` and write ``content`` in full.

    Existing contents are replaced, never appended to. Without ``fsync`` the
    data is handed to the operating system's buffered write path; with it the
    file is synced to stable storage before returning. A failure partway
    through may leave a partial or empty file behind.

    Args:
        path: Location to write. Parent directories are not created.
        content: Text to store.
        fsync: Sync the file to stable storage before returning.

    Raises:
        TextFileError: When the path is unusable, the file cannot be created,
            truncated or fully written, or ``content`` cannot be encoded.

    Example:
        >>> import tempfile, pathlib
        >>> target = pathlib.Path(tempfile.mkdtemp()) / "note.txt"
        >>> write_text_file(target, "ab")
        >>> write_text_file(target, "x")
        >>> target.read_bytes()
        b'x'
    """
    location = os.fspath(path)
    try:
        data = content.encode(TEXT_ENCODING)
        with open(location, "wb") as handle:
            handle.write(data)
            if fsync:
                handle.flush()
                os.fsync(handle.fileno())
    except (OSError, ValueError) as exc:  # ValueError: unencodable text or a NUL in the path
        error = wrap_io_error(exc, FileOperation.WRITE, location)
        logger.debug("Writing file failed", extra={"path": location, "kind": error.kind.value})
        raise error from exc
    logger.debug("Wrote file", extra={"path": location, "bytes": len(data), "fsync": fsync})


__all__ = [
    "TEXT_ENCODING",
    "read_text_file",
    "write_text_file",
]
