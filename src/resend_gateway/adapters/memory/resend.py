"""In-memory Resend client for testing.

Provides a client that satisfies the ResendTransport protocol but performs
no HTTP requests.

Contents:
    * :class:`ResendSpy` - Captures probe and send calls for test assertions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..resend.client import ResendErrorBody, ResendResponse
from ..resend.config import ResendConfig
from ..resend.gateway import EmailGateway


def _empty_payload_list() -> list[dict[str, Any]]:
    """Create an empty typed list for captured payloads."""
    return []


@dataclass
class ResendSpy:
    """Captures vendor calls for test assertions.

    Each test should create its own ResendSpy instance to avoid cross-test pollution.

    Attributes:
        sent_payloads: JSON bodies passed to ``send_email``.
        probe_calls: Number of ``list_domains`` calls.
        clients_built: Number of times :meth:`build_client` ran.
        domains: Domains returned by the probe.
        message_id: Id returned by sends; None simulates a response without one.
        probe_exception: When set, ``list_domains`` raises it.
        send_exception: When set, ``send_email`` raises it.
        send_error: When set, ``send_email`` returns it as an embedded error.

    Example:
        >>> import asyncio
        >>> spy = ResendSpy()
        >>> gateway = spy.build_gateway(ResendConfig(api_key="re_1", from_email="a@example.org"))
        >>> asyncio.run(gateway.send_email("b@example.org", "Hi", "<p>Hello</p>")).message_id
        'msg_in_memory'
        >>> spy.sent_payloads[0]["text"]
        'Hello'
    """

    sent_payloads: list[dict[str, Any]] = field(default_factory=_empty_payload_list)
    probe_calls: int = 0
    clients_built: int = 0
    domains: list[dict[str, Any]] = field(default_factory=_empty_payload_list)
    message_id: str | None = "msg_in_memory"
    probe_exception: Exception | None = None
    send_exception: Exception | None = None
    send_error: ResendErrorBody | None = None

    @property
    def network_calls(self) -> int:
        return self.probe_calls + len(self.sent_payloads)

    def clear(self) -> None:
        """Reset captured data and injected failures for next test."""
        self.sent_payloads.clear()
        self.probe_calls = 0
        self.clients_built = 0
        self.probe_exception = None
        self.send_exception = None
        self.send_error = None

    async def list_domains(self) -> list[dict[str, Any]]:
        self.probe_calls += 1
        if self.probe_exception is not None:
            raise self.probe_exception
        return list(self.domains)

    async def send_email(self, payload: dict[str, Any]) -> ResendResponse:
        self.sent_payloads.append(payload)
        if self.send_exception is not None:
            raise self.send_exception
        if self.send_error is not None:
            return ResendResponse(error=self.send_error)
        data: dict[str, Any] = {"id": self.message_id} if self.message_id is not None else {}
        return ResendResponse(data=data)

    def build_client(self, config: ResendConfig) -> ResendSpy:
        """Client factory handing out this spy; counts constructions."""
        self.clients_built += 1
        return self

    def build_gateway(self, config: ResendConfig) -> EmailGateway:
        """Wire a gateway whose client is this spy."""
        return EmailGateway(config, client_factory=self.build_client)


__all__ = ["ResendSpy"]
