"""Application layer - port definitions.

Contains the Protocol interfaces that adapter implementations satisfy.

Contents:
    * :mod:`.ports` - Protocol definitions for the vendor client, gateway and adapter functions
"""

from __future__ import annotations

from .ports import (
    BuildEmailGateway,
    ClientFactory,
    DisplayConfig,
    EmailGatewayPort,
    GetConfig,
    InitLogging,
    LoadResendConfig,
    ResendTransport,
)

__all__ = [
    "BuildEmailGateway",
    "ClientFactory",
    "DisplayConfig",
    "EmailGatewayPort",
    "GetConfig",
    "InitLogging",
    "LoadResendConfig",
    "ResendTransport",
]
