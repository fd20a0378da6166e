"""Shared pytest fixtures for gateway, CLI and module-entry tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from resend_gateway.adapters.memory.resend import ResendSpy
    from resend_gateway.adapters.resend.gateway import EmailGateway
    from resend_gateway.composition import AppServices


ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))
RESEND_ENV_VARIABLES: tuple[str, ...] = ("RESEND_API_KEY", "RESEND_FROM_EMAIL", "RESEND_FROM_NAME")

VALID_RESEND_SECTION: dict[str, Any] = {
    "api_key": "re_test_123",
    "from_email": "noreply@example.org",
    "from_name": "Argument Graph",
}


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


@pytest.fixture(autouse=True)
def isolated_resend_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ``RESEND_*`` variables so a developer's shell or .env cannot leak into tests.

    Tests that need them set them explicitly with ``monkeypatch.setenv``.
    """
    for name in RESEND_ENV_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output (e.g., JSON parsing) so log
    lines written to stderr do not contaminate the parsed text.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests.

    Example:
        def test_info(cli_runner: CliRunner, production_factory: Callable[[], AppServices]) -> None:
            result = cli_runner.invoke(cli, ["info"], obj=production_factory)
            assert result.exit_code == 0
    """
    from resend_gateway.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
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
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, because a test may have monkeypatched
    the function (losing ``cache_clear``).
    """
    from resend_gateway.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O.

    Example:
        def test_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"resend": {"from_name": "Ops"}})
            assert config.get("resend.from_name") == "Ops"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def resend_spy() -> ResendSpy:
    """Provide a fresh in-memory Resend client."""
    from resend_gateway.adapters.memory import ResendSpy as ResendSpyImpl

    return ResendSpyImpl()


@pytest.fixture
def configured_gateway(resend_spy: ResendSpy) -> EmailGateway:
    """A gateway with complete settings whose client is ``resend_spy``."""
    from resend_gateway.adapters.resend import ResendConfig

    return resend_spy.build_gateway(ResendConfig(**VALID_RESEND_SECTION))


@pytest.fixture
def unconfigured_gateway(resend_spy: ResendSpy) -> EmailGateway:
    """A gateway without an API key whose client would be ``resend_spy``."""
    from resend_gateway.adapters.resend import ResendConfig

    return resend_spy.build_gateway(ResendConfig(from_email="noreply@example.org"))


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create a production services factory whose configuration is ``config_data``.

    Only the I/O boundary (``get_config``) is replaced.

    Example:
        def test_config_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"section": {"key": "value"}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "key" in result.output
    """
    from resend_gateway.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            load_resend_config=prod.load_resend_config,
            build_email_gateway=prod.build_email_gateway,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose ``get_config`` records the profile it was asked for."""
    from resend_gateway.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            display_config=prod.display_config,
            load_resend_config=prod.load_resend_config,
            build_email_gateway=prod.build_email_gateway,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _inject


@dataclass
class ResendCliContext:
    """Container for Resend CLI test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: ResendSpy standing in for the vendor client.
    """

    factory: Callable[[], Any]
    spy: ResendSpy


@pytest.fixture
def resend_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], ResendCliContext]:
    """Create a CLI test context whose ``[resend]`` section is ``resend_data``.

    The vendor client is a ResendSpy; logging and display stay production.

    Example:
        def test_send(cli_runner, resend_cli_context) -> None:
            ctx = resend_cli_context({"api_key": "re_1", "from_email": "a@example.org"})
            result = cli_runner.invoke(
                cli, ["send-email", "--to", "b@example.org", "--subject", "Hi", "--html", "<p>x</p>"],
                obj=ctx.factory,
            )
            assert ctx.spy.sent_payloads[0]["subject"] == "Hi"
    """
    from resend_gateway.adapters.memory import ResendSpy as ResendSpyImpl
    from resend_gateway.adapters.memory import load_resend_config_in_memory
    from resend_gateway.composition import AppServices, build_production

    def _create(resend_data: dict[str, Any]) -> ResendCliContext:
        spy = ResendSpyImpl()
        config = Config({"resend": resend_data}, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            load_resend_config=load_resend_config_in_memory,
            build_email_gateway=spy.build_gateway,
            init_logging=prod.init_logging,
        )
        return ResendCliContext(factory=lambda: test_services, spy=spy)

    return _create
