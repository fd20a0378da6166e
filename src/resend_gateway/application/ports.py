"""Application ports: Protocol definitions for adapter objects and functions.

Callable protocols define a ``__call__`` whose signature matches the
corresponding adapter function, so module-level functions satisfy them via
structural subtyping (PEP 544). :class:`ResendTransport` and
:class:`EmailGatewayPort` describe the objects handed around at runtime.

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``ResendConfig``, ``ResendResponse``) are imported under
    ``TYPE_CHECKING`` only so that the layer stays import-free at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat
from ..domain.models import ConnectionTestResult, SendResult

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.resend.client import ResendResponse
    from ..adapters.resend.config import ResendConfig


class ResendTransport(Protocol):
    """Vendor client handle: a read-only probe and a send call."""

    async def list_domains(self) -> list[dict[str, Any]]: ...

    async def send_email(self, payload: dict[str, Any]) -> ResendResponse: ...


class ClientFactory(Protocol):
    """Construct a vendor client from validated settings."""

    def __call__(self, config: ResendConfig) -> ResendTransport: ...


class EmailGatewayPort(Protocol):
    """Configuration-guarded access to the vendor."""

    def is_configured(self) -> bool: ...

    def get_client(self) -> ResendTransport: ...

    async def test_connection(self) -> ConnectionTestResult: ...

    async def send_email(
        self,
        to: str | Sequence[str],
        subject: str,
        html: str,
        text: str | None = ...,
    ) -> SendResult: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadResendConfig(Protocol):
    """Load ResendConfig from a configuration dictionary and the environment."""

    def __call__(self, config_dict: Mapping[str, Any], environ: Mapping[str, str] | None = ...) -> ResendConfig: ...


class BuildEmailGateway(Protocol):
    """Wire a gateway around validated settings."""

    def __call__(self, config: ResendConfig) -> EmailGatewayPort: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


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
