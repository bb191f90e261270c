"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Module-level functions and
bound methods satisfy these protocols automatically via structural
subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``,
    ``FileSettings``) are imported under ``TYPE_CHECKING`` only so that the
    layer stays free of adapter imports at runtime.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.filesystem.settings import FileSettings


class ReadTextFile(Protocol):
    """Read a whole file and return it as text."""

    def __call__(self, path: str | os.PathLike[str]) -> str: ...


class WriteTextFile(Protocol):
    """Create or replace a file with the given text."""

    def __call__(self, path: str | os.PathLike[str], content: str, *, fsync: bool = ...) -> None: ...


class LoadFileSettings(Protocol):
    """Build FileSettings from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> FileSettings: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadFileSettings",
    "ReadTextFile",
    "WriteTextFile",
]
