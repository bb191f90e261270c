"""In-memory implementations of every application port, for tests.

Contents:
    * :mod:`.config` - Empty config and a silent display
    * :mod:`.files` - :class:`InMemoryFileStore` with injectable failures
    * :mod:`.logging` - A quiet lib_log_rich runtime
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .files import InMemoryFileStore
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from textbridge.application.ports import DisplayConfig, GetConfig, InitLogging, ReadTextFile, WriteTextFile

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_read_text_file: ReadTextFile = InMemoryFileStore().read_text_file
    _assert_write_text_file: WriteTextFile = InMemoryFileStore().write_text_file

__all__ = [
    "InMemoryFileStore",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
