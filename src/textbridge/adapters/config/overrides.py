"""``--set SECTION.KEY=VALUE`` overrides layered on top of the loaded config."""

from __future__ import annotations

from typing import Any, NamedTuple

import orjson
from lib_layered_config import Config


class Override(NamedTuple):
    """One ``--set`` entry: the dotted path split into parts, and its value."""

    path: tuple[str, ...]
    value: Any


def parse_override(raw: str) -> Override:
    """Parse ``files.fsync=true`` into ``Override(("files", "fsync"), True)``.

    Everything after the first ``=`` is the value. The path needs a section
    and at least one key.

    Raises:
        ValueError: If the text is not ``SECTION.KEY=VALUE``.

    Examples:
        >>> parse_override("files.fsync=true")
        Override(path=('files', 'fsync'), value=True)
        >>> parse_override("lib_log_rich.console_format_preset=short_loc").value
        'short_loc'
    """
    dotted, sep, text = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    path = tuple(dotted.strip().split("."))
    if len(path) < 2:
        raise ValueError(f"Invalid override {raw!r}: expected SECTION.KEY with at least one dot")
    if not all(path):
        raise ValueError(f"Invalid override {raw!r}: empty component in {dotted!r}")
    return Override(path, coerce_value(text))


def coerce_value(text: str) -> Any:
    """Read ``text`` as JSON where it parses, otherwise keep it as a string.

    Examples:
        >>> coerce_value("false"), coerce_value("3"), coerce_value("[1, 2]")
        (False, 3, [1, 2])
        >>> coerce_value("DEBUG")
        'DEBUG'
    """
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError:
        return text


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` entry merged in, later ones winning.

    Raises:
        ValueError: If an entry is malformed, or nests a key under one that an
            earlier entry set to a plain value.

    Example:
        >>> cfg = Config({"files": {"fsync": False}}, {})
        >>> apply_overrides(cfg, ("files.fsync=true",))["files"]["fsync"]
        True
    """
    if not raw_overrides:
        return config
    merged: dict[str, Any] = {}
    for raw in raw_overrides:
        path, value = parse_override(raw)
        table = merged
        for part in path[:-1]:
            table = table.setdefault(part, {})
            if not isinstance(table, dict):
                raise ValueError(f"Invalid override {raw!r}: {part!r} is already set to a plain value")
        table[path[-1]] = value
    return config.with_overrides(merged)


__all__ = ["Override", "apply_overrides", "coerce_value", "parse_override"]
