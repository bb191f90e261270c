"""In-memory file adapters for testing.

Provides a file store whose methods satisfy the same Protocols as the
production filesystem adapter but never touch the disk.

Contents:
    * :class:`InMemoryFileStore` - Dict-backed store with failure injection.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from ...domain.enums import FileOperation, IOErrorKind
from ...domain.errors import TextFileError

_DETAILS: dict[IOErrorKind, str] = {
    IOErrorKind.NOT_FOUND: "No such file or directory",
    IOErrorKind.PERMISSION_DENIED: "Permission denied",
    IOErrorKind.INVALID_TEXT: "stream did not contain valid UTF-8",
    IOErrorKind.NO_SUCH_DIRECTORY: "No such file or directory",
    IOErrorKind.STORAGE_FULL: "No space left on device",
    IOErrorKind.OTHER: "Input/output error",
}


def _empty_files() -> dict[str, str]:
    """Create an empty typed mapping of path to content."""
    return {}


def _empty_paths() -> list[str]:
    """Create an empty typed list of paths."""
    return []


@dataclass
class InMemoryFileStore:
    """Dict-backed stand-in for the host filesystem.

    Each test should create its own store to avoid cross-test pollution.
    The read/write methods match the Protocol signatures expected by
    AppServices.

    Attributes:
        files: Stored contents keyed by path text.
        synced_paths: Paths written with ``fsync=True``, in call order.
        fail_reads_with: When set, every read fails with this kind.
        fail_writes_with: When set, every write fails with this kind.

    Example:
        >>> store = InMemoryFileStore()
        >>> store.write_text_file("a.txt", "ab")
        >>> store.write_text_file("a.txt", "x")
        >>> store.read_text_file("a.txt")
        'x'
    """

    files: dict[str, str] = field(default_factory=_empty_files)
    synced_paths: list[str] = field(default_factory=_empty_paths)
    fail_reads_with: IOErrorKind | None = None
    fail_writes_with: IOErrorKind | None = None

    def clear(self) -> None:
        """Reset stored files and injected failures."""
        self.files.clear()
        self.synced_paths.clear()
        self.fail_reads_with = None
        self.fail_writes_with = None

    def read_text_file(self, path: str | os.PathLike[str]) -> str:
        """Return stored content or fail the way the filesystem would."""
        location = os.fspath(path)
        if self.fail_reads_with is not None:
            raise _failure(self.fail_reads_with, FileOperation.READ, location)
        try:
            return self.files[location]
        except KeyError:
            raise _failure(IOErrorKind.NOT_FOUND, FileOperation.READ, location) from None

    def write_text_file(self, path: str | os.PathLike[str], content: str, *, fsync: bool = False) -> None:
        """Replace stored content for ``path``."""
        location = os.fspath(path)
        if self.fail_writes_with is not None:
            raise _failure(self.fail_writes_with, FileOperation.WRITE, location)
        self.files[location] = content
        if fsync:
            self.synced_paths.append(location)


def _failure(kind: IOErrorKind, operation: FileOperation, path: str) -> TextFileError:
    return TextFileError(kind, operation, path, _DETAILS[kind])


__all__ = ["InMemoryFileStore"]
