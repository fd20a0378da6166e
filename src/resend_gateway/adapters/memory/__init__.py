"""In-memory adapter implementations for testing.

Provides lightweight implementations of the application ports that operate
entirely in memory -- no filesystem, no HTTP, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration and logging adapters
    * :mod:`.resend` - In-memory Resend client (ResendSpy class)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    init_logging_in_memory,
    load_resend_config_in_memory,
)
from .resend import ResendSpy

# Static conformance assertions
if TYPE_CHECKING:
    from resend_gateway.application.ports import (
        ClientFactory,
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadResendConfig,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_resend_config: LoadResendConfig = load_resend_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_client_factory: ClientFactory = ResendSpy().build_client

__all__ = [
    "ResendSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_resend_config_in_memory",
]
