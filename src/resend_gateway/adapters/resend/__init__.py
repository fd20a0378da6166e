"""Resend adapter - transactional email over the Resend HTTP API.

Structure:
    * :mod:`.config` - Settings model and loader
    * :mod:`.client` - httpx-backed vendor client
    * :mod:`.gateway` - Configuration-guarded gateway

Contents:
    * :class:`.config.ResendConfig` - Validated settings
    * :func:`.config.load_resend_config` - Config dict + environment loader
    * :class:`.client.ResendClient` - Vendor client
    * :class:`.gateway.EmailGateway` - Gateway exposed to callers
"""

from __future__ import annotations

from .client import ResendApiError, ResendClient, ResendErrorBody, ResendResponse, build_resend_client
from .config import ResendConfig, load_resend_config
from .gateway import EmailGateway


def build_email_gateway(config: ResendConfig) -> EmailGateway:
    """Wire a production gateway around validated settings."""
    return EmailGateway(config, client_factory=build_resend_client)


__all__ = [
    "EmailGateway",
    "ResendApiError",
    "ResendClient",
    "ResendConfig",
    "ResendErrorBody",
    "ResendResponse",
    "build_email_gateway",
    "build_resend_client",
    "load_resend_config",
]
