"""Public package surface exposing the host-callable operations.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Host API: greet, init_app, read_file, save_file
- Domain exports: Failure type and kinds
- Configuration: the layered config loader
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Host API
from .api import greet, init_app, read_file, save_file

# Configuration
from .adapters.config.loader import get_config

# Domain exports
from .domain.enums import FileOperation, IOErrorKind
from .domain.errors import TextFileError

__all__ = [
    "FileOperation",
    "IOErrorKind",
    "TextFileError",
    "get_config",
    "greet",
    "init_app",
    "print_info",
    "read_file",
    "save_file",
]
