"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the greeting behaviour, the initialize hook and the I/O error
taxonomy shared by every adapter.

Contents:
    * :mod:`.behaviors` - Core domain behaviors (greeting, initialize)
    * :mod:`.enums` - Domain enumerations (IOErrorKind, FileOperation, OutputFormat)
    * :mod:`.errors` - Domain exception types and error classification
"""

from __future__ import annotations

from .behaviors import (
    GREETING_PREFIX,
    GREETING_SUFFIX,
    build_greeting,
    initialize,
)
from .enums import FileOperation, IOErrorKind, OutputFormat
from .errors import ConfigurationError, TextFileError, classify_io_error, wrap_io_error

__all__ = [
    # Behaviors
    "GREETING_PREFIX",
    "GREETING_SUFFIX",
    "build_greeting",
    "initialize",
    # Enums
    "FileOperation",
    "IOErrorKind",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "TextFileError",
    "classify_io_error",
    "wrap_io_error",
]
