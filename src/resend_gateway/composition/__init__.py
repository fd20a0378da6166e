"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Resend services
from ..adapters.resend import build_email_gateway, build_resend_client, load_resend_config

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.resend import ResendSpy
    from ..application.ports import (
        BuildEmailGateway,
        ClientFactory,
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadResendConfig,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_resend_config: LoadResendConfig = load_resend_config
    _assert_build_email_gateway: BuildEmailGateway = build_email_gateway
    _assert_build_resend_client: ClientFactory = build_resend_client
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_resend_config: LoadResendConfig
    build_email_gateway: BuildEmailGateway
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_resend_config=load_resend_config,
        build_email_gateway=build_email_gateway,
        init_logging=init_logging,
    )


def build_testing(*, spy: ResendSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional ResendSpy instance standing in for the vendor client.
            When None, a fresh ResendSpy is created. Pass your own spy
            to assert on captured calls in tests.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        ResendSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_resend_config_in_memory,
    )

    resend_spy = spy if spy is not None else ResendSpy()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_resend_config=load_resend_config_in_memory,
        build_email_gateway=resend_spy.build_gateway,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    # Resend
    "load_resend_config",
    "build_email_gateway",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
