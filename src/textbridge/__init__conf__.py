"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` by hand on every release;
``tests/test_metadata.py`` fails when the version drifts.

Contents:
    * Module-level constants describing the distribution.
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config path discovery.
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "textbridge"
#: Human-readable summary shown in CLI help output.
title = "Host-callable greeting and whole-file text I/O"
#: Current release version pulled from ``pyproject.toml``.
version = "1.0.0"
#: Repository homepage.
homepage = "https://github.com/textbridge/textbridge"
#: Author attribution surfaced in CLI output.
author = "textbridge contributors"
#: Contact email surfaced in CLI output.
author_email = "maintainers@textbridge.invalid"
#: Console-script name published by the package.
shell_command = "textbridge"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "textbridge"
#: Application display name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "textbridge"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: str = "textbridge"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for textbridge:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
