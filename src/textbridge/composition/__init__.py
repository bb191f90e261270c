"""Composition root: choose real or in-memory adapters for every port.

The host API and the CLI never import adapters directly for I/O; they ask an
:class:`AppServices` for the port they need.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.filesystem.settings import load_file_settings_from_dict
from ..adapters.filesystem.text_io import read_text_file, write_text_file
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..adapters.memory.files import InMemoryFileStore
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadFileSettings,
        ReadTextFile,
        WriteTextFile,
    )


@dataclass(frozen=True, slots=True)
class AppServices:
    """One implementation per port; swap fields with ``dataclasses.replace``."""

    read_text_file: ReadTextFile
    write_text_file: WriteTextFile
    load_file_settings: LoadFileSettings
    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Real filesystem, layered config from disk and lib_log_rich from ``[lib_log_rich]``."""
    return AppServices(
        read_text_file=read_text_file,
        write_text_file=write_text_file,
        load_file_settings=load_file_settings_from_dict,
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
    )


def build_testing(*, store: InMemoryFileStore | None = None) -> AppServices:
    """Files live in ``store`` (a fresh one when omitted); config is empty and never shown.

    Example:
        >>> from textbridge.adapters.memory import InMemoryFileStore
        >>> store = InMemoryFileStore()
        >>> build_testing(store=store).write_text_file("a.txt", "hi")
        >>> store.files
        {'a.txt': 'hi'}
    """
    from ..adapters.memory import (
        InMemoryFileStore,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    files = store if store is not None else InMemoryFileStore()
    return AppServices(
        read_text_file=files.read_text_file,
        write_text_file=files.write_text_file,
        load_file_settings=load_file_settings_from_dict,
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = ["AppServices", "build_production", "build_testing"]
