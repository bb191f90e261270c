"""File handling settings model and loader.

Provides the FileSettings Pydantic model for the ``[files]`` configuration
section and the loader that builds it from a layered Config.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from textbridge.domain.errors import ConfigurationError


class FileSettings(BaseModel):
    """Validated, immutable settings for whole-file writes.

    Attributes:
        fsync: Sync written files to stable storage before a save returns.

    Example:
        >>> FileSettings().fsync
        False
        >>> FileSettings(fsync="true").fsync
        True
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    fsync: bool = False

    @field_validator("fsync", mode="before")
    @classmethod
    def _coerce_empty_string_to_default(cls, v: Any) -> Any:
        """Treat an empty value from env or .env files as "not configured"."""
        if isinstance(v, str) and not v.strip():
            return False
        return v


def load_file_settings_from_dict(config_dict: Mapping[str, Any]) -> FileSettings:
    """Build FileSettings from the raw ``[files]`` section.

    Args:
        config_dict: Section contents; may be empty.

    Returns:
        Parsed settings.

    Raises:
        ConfigurationError: When a value cannot be parsed.

    Example:
        >>> load_file_settings_from_dict({"fsync": True}).fsync
        True
        >>> load_file_settings_from_dict({}).fsync
        False
    """
    try:
        return FileSettings.model_validate(dict(config_dict))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [files] configuration: {exc}") from exc


def load_file_settings(config: Config) -> FileSettings:
    """Read the ``[files]`` section of ``config`` into FileSettings.

    Example:
        >>> load_file_settings(Config({"files": {"fsync": True}}, {})).fsync
        True
    """
    raw: object = config.get("files", default={})
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[files] must be a table, got {type(raw).__name__}")
    return load_file_settings_from_dict(cast("Mapping[str, Any]", raw))


__all__ = [
    "FileSettings",
    "load_file_settings",
    "load_file_settings_from_dict",
]
