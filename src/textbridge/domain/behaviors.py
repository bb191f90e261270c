"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

GREETING_PREFIX = "Hello, "
GREETING_SUFFIX = "!"


def build_greeting(name: str) -> str:
    r"""Return the greeting for ``name``.

    Total over all text, including the empty string. The name is inserted
    verbatim: no trimming, no escaping, no case changes.

    Args:
        name: Text to greet.

    Returns:
        ``"Hello, {name}!"``.

    Example:
        >>> build_greeting("World")
        'Hello, World!'
        >>> build_greeting("")
        'Hello, !'
    """
    return f"{GREETING_PREFIX}{name}{GREETING_SUFFIX}"


def initialize() -> None:
    """Lifecycle hook signalling the service is ready.

    Performs no setup and has no observable effect.

    Example:
        >>> initialize() is None
        True
    """


__all__ = [
    "GREETING_PREFIX",
    "GREETING_SUFFIX",
    "build_greeting",
    "initialize",
]
