"""Logging adapter for in-memory wiring.

Commands always run inside ``lib_log_rich.runtime.bind``, which needs a live
runtime. This adapter starts one that only prints critical records and never
bridges stdlib ``logging``, so test output stays the command's own.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config

from textbridge import __init__conf__


def init_logging_in_memory(config: Config) -> None:
    """Start a quiet lib_log_rich runtime unless one is already running.

    ``config`` is ignored: the in-memory wiring never reads ``[lib_log_rich]``.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(
        lib_log_rich.runtime.RuntimeConfig(
            service=__init__conf__.name,
            environment="test",
            console_level="CRITICAL",
        )
    )


__all__ = ["init_logging_in_memory"]
