"""Application layer - port definitions.

Defines the interfaces adapter implementations must satisfy so the
composition root can swap production and in-memory wiring.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadFileSettings,
    ReadTextFile,
    WriteTextFile,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadFileSettings",
    "ReadTextFile",
    "WriteTextFile",
]
