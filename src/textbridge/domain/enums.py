"""Type-safe domain enums for I/O failure kinds, file operations and output formats."""

from __future__ import annotations

from enum import Enum


class IOErrorKind(str, Enum):
    """Cause reported for a failed file read or write.

    Inherits from str so kinds compare equal to their plain values and
    serialise cleanly into log records.

    Attributes:
        NOT_FOUND: The file to read does not exist.
        PERMISSION_DENIED: The platform refused access.
        INVALID_TEXT: The file bytes are not valid UTF-8.
        NO_SUCH_DIRECTORY: The parent directory of a write target is missing.
        STORAGE_FULL: The device or quota ran out of space.
        OTHER: Any other platform-reported failure.

    Example:
        >>> IOErrorKind.NOT_FOUND.value
        'not-found'
        >>> IOErrorKind.STORAGE_FULL == "storage-full"
        True
    """

    NOT_FOUND = "not-found"
    PERMISSION_DENIED = "permission-denied"
    INVALID_TEXT = "invalid-text"
    NO_SUCH_DIRECTORY = "no-such-directory"
    STORAGE_FULL = "storage-full"
    OTHER = "other"


class FileOperation(str, Enum):
    """Which whole-file operation failed.

    Example:
        >>> FileOperation.READ.value
        'read'
    """

    READ = "read"
    WRITE = "write"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "FileOperation",
    "IOErrorKind",
    "OutputFormat",
]
