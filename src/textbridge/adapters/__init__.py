"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the application to the host
filesystem and to the frameworks it runs under.

Contents:
    * :mod:`.filesystem` - Whole-file UTF-8 text I/O
    * :mod:`.config` - Configuration loading, overrides, and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory implementations for tests
    * :mod:`.cli` - Click CLI acting as a reference host
"""

from __future__ import annotations

__all__: list[str] = []
