"""Public package surface for the Resend email gateway.

Routes imports through the architectural layers:
- Domain exports: value objects and error types
- Adapter exports: gateway, settings model and loader
- Composition exports: production wiring
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports
from .adapters.resend import EmailGateway, ResendConfig, load_resend_config

# Composition exports (wired adapters)
from .composition import build_email_gateway, build_production, get_config

# Domain exports
from .domain.errors import ApiError, InternalError, ServiceUnavailableError
from .domain.models import ConnectionTestResult, EmailMessage, SendResult

__all__ = [
    "ApiError",
    "ConnectionTestResult",
    "EmailGateway",
    "EmailMessage",
    "InternalError",
    "ResendConfig",
    "SendResult",
    "ServiceUnavailableError",
    "build_email_gateway",
    "build_production",
    "get_config",
    "load_resend_config",
    "print_info",
]
