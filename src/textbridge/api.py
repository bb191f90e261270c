"""Host-callable surface: greet, init, read a file, save a file.

These four functions are what an embedding application calls. They hold no
state between calls, can be invoked in any order or concurrently, and
provide no locking around the filesystem.

Contents:
    * :func:`greet` - Format the greeting for a name.
    * :func:`init_app` - Lifecycle hook with no effect.
    * :func:`read_file` - Read a whole file as text.
    * :func:`save_file` - Create or replace a file with text.

System Role:
    Sits at package level next to :mod:`textbridge.entry`; delegates to the
    domain and to the production filesystem adapter wired by
    :mod:`textbridge.composition`.
"""

from __future__ import annotations

import logging
import os

from .composition import build_production
from .domain.behaviors import build_greeting, initialize

logger = logging.getLogger(__name__)

_services = build_production()


def greet(name: str) -> str:
    """Return ``"Hello, {name}!"``.

    Example:
        >>> greet("World")
        'Hello, World!'
    """
    return build_greeting(name)


def init_app() -> None:
    """Signal that the host considers the service ready.

    Performs no setup and cannot fail; safe to call any number of times.
    """
    initialize()
    logger.debug("textbridge initialised")


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the full text contents of ``path``.

    Raises:
        TextFileError: Not found, permission denied, invalid UTF-8, or any
            other platform I/O failure.
    """
    return _services.read_text_file(path)


def save_file(path: str | os.PathLike[str], content: str, *, fsync: bool = False) -> None:
    """Write ``content`` to ``path``, replacing anything already there.

    Args:
        path: Target location; its directory must exist.
        content: Text to store.
        fsync: Sync to stable storage before returning. Off by default, in
            which case the data is only handed to the OS write buffers.

    Raises:
        TextFileError: Permission denied, missing directory, storage full,
            or any other platform I/O failure.
    """
    _services.write_text_file(path, content, fsync=fsync)


__all__ = [
    "greet",
    "init_app",
    "read_file",
    "save_file",
]
