"""Filesystem adapter - whole-file text I/O and file settings.

Contents:
    * :mod:`.text_io` - UTF-8 whole-file read and write
    * :mod:`.settings` - ``[files]`` configuration model
"""

from __future__ import annotations

from .settings import FileSettings, load_file_settings, load_file_settings_from_dict
from .text_io import TEXT_ENCODING, read_text_file, write_text_file

__all__ = [
    "TEXT_ENCODING",
    "FileSettings",
    "load_file_settings",
    "load_file_settings_from_dict",
    "read_text_file",
    "write_text_file",
]
