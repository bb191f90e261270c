"""Layered configuration: loading with profiles, `--set` overrides, and display."""

from __future__ import annotations

from .display import display_config
from .loader import get_config
from .overrides import apply_overrides

__all__ = [
    "apply_overrides",
    "display_config",
    "get_config",
]
