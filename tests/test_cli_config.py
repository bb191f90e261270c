"""CLI config stories: display, JSON format, sections, profiles and --set overrides."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result
from lib_layered_config import Config

from textbridge.adapters import cli as cli_mod
from textbridge.adapters.cli.exit_codes import ExitCode

# ======================== display ========================


@pytest.mark.os_agnostic
def test_when_config_is_invoked_it_shows_the_files_section(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """The shipped defaults include the [files] section."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "files"], obj=production_factory)

    assert result.exit_code == 0
    assert "[files]" in result.stdout
    assert "fsync" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_format_it_outputs_json(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """--format json emits a JSON document on stdout."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=production_factory)

    assert result.exit_code == 0
    assert "{" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_nonexistent_section_it_fails(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Unknown sections exit 22 with a message on stderr."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "no_such_section"], obj=production_factory)

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "not found" in result.stderr


@pytest.mark.os_agnostic
def test_when_config_has_nested_values_human_format_shows_them(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
) -> None:
    """Tables, lists and scalars all render."""
    factory = inject_config(
        config_factory(
            {
                "files": {"fsync": True},
                "lib_log_rich": {"console_level": "INFO", "payload_limits": {"message_max_chars": 4096}},
            }
        )
    )

    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=factory)

    assert result.exit_code == 0
    assert "[files]" in result.output
    assert "[lib_log_rich]" in result.output
    assert "console_level" in result.output
    assert "payload_limits" in result.output


@pytest.mark.os_agnostic
def test_when_config_uses_json_format_with_section_only_that_section_shows(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
) -> None:
    """--section narrows JSON output too."""
    factory = inject_config(config_factory({"files": {"fsync": True}, "lib_log_rich": {"console_level": "INFO"}}))

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json", "--section", "files"], obj=factory)

    assert result.exit_code == 0
    assert "fsync" in result.stdout
    assert "console_level" not in result.stdout


# ======================== profiles ========================


@pytest.mark.os_agnostic
def test_when_root_profile_is_given_it_reaches_get_config(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    """--profile on the root group is used for the initial load."""
    captured: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({"files": {"fsync": False}}), captured)

    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "staging", "config"], obj=factory)

    assert result.exit_code == 0
    assert captured == ["staging"]


@pytest.mark.os_agnostic
def test_when_profile_and_set_are_combined_config_shows_the_override(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    """--set applies on top of the profile's config, which is loaded once."""
    captured: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({"files": {"note": "original"}}), captured)

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--profile", "test", "--set", "files.note=overridden", "config", "--format", "json"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert captured == ["test"]
    assert "overridden" in result.stdout
    assert '"original"' not in result.stdout


@pytest.mark.os_agnostic
def test_config_command_has_no_profile_option_of_its_own(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    """Profiles are chosen on the root group only."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--profile", "test"], obj=testing_factory)

    assert result.exit_code == 2
    assert "No such option" in result.output


@pytest.mark.os_agnostic
def test_when_profile_name_is_invalid_it_fails(
    cli_runner: CliRunner,
    clear_config_cache: None,
    production_factory: Callable[[], Any],
) -> None:
    """Path-like profile names are a usage error, raised before any file is read."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "../escape", "config"], obj=production_factory)

    assert result.exit_code == 2
    assert "Error" in result.output
    assert "Traceback" not in result.output


# ======================== --set overrides ========================


@pytest.mark.os_agnostic
def test_when_set_overrides_are_given_config_shows_them(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
) -> None:
    """Every --set applies, including nested keys."""
    factory = inject_config(
        config_factory({"lib_log_rich": {"console_level": "INFO", "payload_limits": {"message_max_chars": 4096}}})
    )

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        [
            "--set",
            "lib_log_rich.console_level=DEBUG",
            "--set",
            "lib_log_rich.payload_limits.message_max_chars=8192",
            "config",
            "--format",
            "json",
        ],
        obj=factory,
    )

    assert result.exit_code == 0
    assert "DEBUG" in result.stdout
    assert "8192" in result.stdout


@pytest.mark.os_agnostic
@pytest.mark.parametrize("bad", ["invalid_no_equals", "nodot=value", ""])
def test_when_set_override_is_malformed_it_shows_usage_error(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
    bad: str,
) -> None:
    """Malformed --set values are usage errors."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--set", bad, "config"], obj=testing_factory)

    assert result.exit_code == 2
    assert "Invalid override" in result.output
