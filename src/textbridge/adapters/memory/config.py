"""Configuration ports for in-memory wiring: an empty config and a silent display."""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(*, profile: str | None = None) -> Config:
    """Return an empty Config whatever the profile.

    ``[files]`` is absent, so file commands fall back to ``FileSettings`` defaults.
    """
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Print nothing."""


__all__ = ["display_config_in_memory", "get_config_in_memory"]
