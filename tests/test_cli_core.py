"""CLI core stories: traceback handling, main entry, help, info, unknown command."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner, Result
from lib_layered_config import Config

from resend_gateway import __init__conf__
from resend_gateway.adapters import cli as cli_mod
from resend_gateway.composition import AppServices, build_production


def _failing_services() -> AppServices:
    """Production wiring whose configuration loader blows up."""
    prod = build_production()

    def _broken_get_config(**_kwargs: Any) -> Config:
        raise RuntimeError("I should fail")

    return AppServices(
        get_config=_broken_get_config,
        display_config=prod.display_config,
        load_resend_config=prod.load_resend_config,
        build_email_gateway=prod.build_email_gateway,
        init_logging=prod.init_logging,
    )


@pytest.mark.os_agnostic
def test_snapshot_traceback_state_returns_disabled_by_default(managed_traceback_state: None) -> None:
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_apply_traceback_preferences_enables_both_flags(managed_traceback_state: None) -> None:
    cli_mod.apply_traceback_preferences(True)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_restore_traceback_state_resets_flags_to_previous(managed_traceback_state: None) -> None:
    previous = cli_mod.snapshot_traceback_state()
    cli_mod.apply_traceback_preferences(True)

    cli_mod.restore_traceback_state(previous)

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_traceback_flag_is_active_during_info_command(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    """--traceback enables both flags during command execution."""
    notes: list[tuple[bool, bool]] = []

    def record() -> None:
        notes.append((lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color))

    monkeypatch.setattr(__init__conf__, "print_info", record)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert exit_code == 0
    assert notes == [(True, True)]


@pytest.mark.os_agnostic
def test_traceback_flags_restored_after_info_command(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    monkeypatch.setattr(__init__conf__, "print_info", lambda: None)

    cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_restore_traceback_false_keeps_flags_enabled(managed_traceback_state: None) -> None:
    cli_mod.apply_traceback_preferences(False)

    cli_mod.main(["--traceback", "info"], restore_traceback=False, services_factory=build_production)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_main_requires_a_services_factory() -> None:
    with pytest.raises(ValueError, match="services_factory is required"):
        cli_mod.main(["info"])


@pytest.mark.os_agnostic
def test_when_main_is_called_it_invokes_cli_with_services_factory(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    result = cli_mod.main(["info"], services_factory=build_production)

    assert result == 0
    assert __init__conf__.name in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_when_main_receives_no_arguments_help_is_shown(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = cli_mod.main([], services_factory=build_production)

    assert exit_code == 0
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_unexpected_error_prints_summary_without_traceback(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    exit_code = cli_mod.main(["info"], services_factory=_failing_services)

    plain_err = strip_ansi(capsys.readouterr().err)

    assert exit_code != 0
    assert "RuntimeError" in plain_err or "I should fail" in plain_err
    assert "Traceback (most recent call last)" not in plain_err


@pytest.mark.os_agnostic
def test_traceback_flag_displays_full_exception_traceback(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """--traceback covers a failing configuration load and the flags are restored afterwards."""
    exit_code = cli_mod.main(["--traceback", "info"], services_factory=_failing_services)

    plain_err = strip_ansi(capsys.readouterr().err)

    assert exit_code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "RuntimeError: I should fail" in plain_err
    assert "[TRUNCATED" not in plain_err
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_when_cli_runs_without_arguments_help_is_printed(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, [], obj=production_factory)

    assert result.exit_code == 0
    assert "Usage:" in result.output


@pytest.mark.os_agnostic
def test_root_help_lists_usage_examples_for_resend_commands(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    strip_ansi: Callable[[str], str],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["--help"], obj=production_factory)

    output = strip_ansi(result.output)
    assert result.exit_code == 0
    assert "Examples:" in output
    assert "resend-gateway check" in output
    assert "resend-gateway send-email" in output


@pytest.mark.os_agnostic
def test_help_lists_every_command(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["--help"], obj=production_factory)

    assert result.exit_code == 0
    for command in ("info", "config", "check", "test-connection", "send-email"):
        assert command in result.output


@pytest.mark.os_agnostic
def test_version_option_prints_version(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["--version"], obj=production_factory)

    assert result.exit_code == 0
    assert f"{__init__conf__.shell_command} version {__init__conf__.version}" in result.output


@pytest.mark.os_agnostic
def test_info_command_displays_project_metadata(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=production_factory)

    assert result.exit_code == 0
    assert f"Info for {__init__conf__.name}:" in result.output
    assert __init__conf__.version in result.output


@pytest.mark.os_agnostic
def test_unknown_command_shows_no_such_command_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["does-not-exist"], obj=production_factory)

    assert result.exit_code != 0
    assert "No such command" in result.output


@pytest.mark.os_agnostic
def test_missing_services_factory_is_reported(cli_runner: CliRunner) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"])

    assert isinstance(result.exception, RuntimeError)
    assert "Services factory not provided" in str(result.exception)


@pytest.mark.os_agnostic
def test_get_cli_context_requires_root_command() -> None:
    import rich_click as click

    ctx = click.Context(cli_mod.cli_info)

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        cli_mod.get_cli_context(ctx)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "code"),
    [
        (cli_mod.ExitCode.SUCCESS, 0),
        (cli_mod.ExitCode.GENERAL_ERROR, 1),
        (cli_mod.ExitCode.INVALID_ARGUMENT, 22),
        (cli_mod.ExitCode.DELIVERY_FAILURE, 69),
        (cli_mod.ExitCode.CONFIG_ERROR, 78),
    ],
)
def test_exit_codes_follow_posix_conventions(member: int, code: int) -> None:
    assert member == code
