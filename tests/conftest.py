"""Shared pytest fixtures for API, adapter and CLI tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from textbridge.adapters.memory import InMemoryFileStore

if TYPE_CHECKING:
    from textbridge.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for file content assertions so log records on
    stderr never contaminate the comparison.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from textbridge.composition import build_production

    return build_production


@pytest.fixture
def file_store() -> InMemoryFileStore:
    """Provide a fresh in-memory file store per test."""
    return InMemoryFileStore()


@pytest.fixture
def testing_factory(file_store: InMemoryFileStore) -> Callable[[], AppServices]:
    """Provide a services factory backed by ``file_store``.

    Example:
        def test_read(cli_runner, file_store, testing_factory) -> None:
            file_store.files["a.txt"] = "hi"
            result = cli_runner.invoke(cli, ["read", "a.txt"], obj=testing_factory)
            assert result.stdout == "hi"
    """
    from textbridge.composition import build_testing

    services = build_testing(store=file_store)
    return lambda: services


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache around the test."""
    from textbridge.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield
    config_mod.get_config.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
    file_store: InMemoryFileStore,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that wires ``config`` into otherwise in-memory services.

    Only the config loader is replaced; display, file settings parsing and
    the ``file_store`` ports behave as they do in ``build_testing``.
    """
    from textbridge.adapters.config.display import display_config
    from textbridge.composition import build_testing

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = replace(build_testing(store=file_store), get_config=_fake_get_config, display_config=display_config)
        return lambda: services

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records the profile it was called with."""
    from textbridge.composition import build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        services = replace(build_production(), get_config=_capturing_get_config)
        return lambda: services

    return _inject


def _shutdown_logging() -> None:
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture(scope="session", autouse=True)
def logging_runtime_closed_at_exit() -> Iterator[None]:
    """Stop whichever lib_log_rich runtime the suite started."""
    yield
    _shutdown_logging()


@pytest.fixture
def stopped_logging_runtime() -> Iterator[None]:
    """Run the test with no lib_log_rich runtime, as in a fresh process."""
    _shutdown_logging()
    yield
    _shutdown_logging()
