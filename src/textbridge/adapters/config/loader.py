"""Layered configuration for textbridge.

Sources merge in precedence order defaults → app → host → user → dotenv →
env. Environment variables take the ``TEXTBRIDGE___SECTION__KEY`` form, so
``TEXTBRIDGE___FILES__FSYNC=true`` turns on synced saves.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from textbridge import __init__conf__

DEFAULT_CONFIG_FILE = Path(__file__).with_name("defaultconfig.toml")
"""Bundled defaults: ``[files] fsync = false`` and the ``[lib_log_rich]`` console."""


def validate_profile(profile: str) -> None:
    """Reject profile names that are unsafe as a directory component.

    Examples:
        >>> validate_profile("staging")
        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: invalid profile name
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None) -> Config:
    """Read the merged configuration, once per profile.

    Args:
        profile: Optional profile name; adds ``profile/<name>/`` to every
            searched directory.

    Raises:
        ValueError: If ``profile`` is not a usable name.

    Example:
        >>> get_config().get("files", default={})["fsync"]
        False
    """
    if profile is not None:
        validate_profile(profile)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_FILE,
    )


__all__ = ["DEFAULT_CONFIG_FILE", "get_config", "validate_profile"]
