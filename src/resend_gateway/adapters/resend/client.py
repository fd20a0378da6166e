"""Async HTTP client for the Resend REST API.

Covers the two vendor operations the gateway needs: listing sending
domains (a read-only credential probe) and sending an email. Transport
failures surface as ``httpx.HTTPError``; HTTP error statuses become
:class:`ResendApiError` for the probe and an embedded
:class:`ResendErrorBody` for sends, mirroring the vendor SDK's
``{data, error}`` envelope.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, cast

import httpx

from resend_gateway import __init__conf__

from .config import DEFAULT_BASE_URL, ResendConfig

logger = logging.getLogger(__name__)

#: Upper bound on response text copied into error messages.
_MAX_ERROR_TEXT = 300


def _error_details(response: httpx.Response) -> tuple[str, str | None]:
    """Extract ``(message, name)`` from an error response.

    Resend answers errors with ``{"statusCode", "message", "name"}``; other
    bodies (proxies, HTML error pages) fall back to truncated raw text.
    """
    try:
        body: Any = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        payload = cast(dict[str, Any], body)
        message = payload.get("message")
        if message:
            return str(message), payload.get("name")
    return response.text[:_MAX_ERROR_TEXT] or response.reason_phrase, None


class ResendApiError(Exception):
    """Vendor call failed with an HTTP error status or an embedded error object.

    Example:
        >>> err = ResendApiError("Resend API error 401: API key is invalid", status_code=401)
        >>> err.status_code
        401
        >>> str(err)
        'Resend API error 401: API key is invalid'
    """

    def __init__(self, message: str, *, status_code: int | None = None, name: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.name = name

    @property
    def is_server_error(self) -> bool:
        return self.status_code is not None and self.status_code >= 500

    @classmethod
    def from_response(cls, response: httpx.Response) -> ResendApiError:
        message, name = _error_details(response)
        return cls(
            f"Resend API error {response.status_code}: {message}",
            status_code=response.status_code,
            name=name,
        )


@dataclass(frozen=True, slots=True)
class ResendErrorBody:
    """Error object embedded in a send response."""

    message: str | None
    name: str | None = None
    status_code: int | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> ResendErrorBody:
        message, name = _error_details(response)
        return cls(message=message, name=name, status_code=response.status_code)


@dataclass(frozen=True, slots=True)
class ResendResponse:
    """Result envelope of a send call: exactly one of ``data``/``error`` is set."""

    data: dict[str, Any] | None = None
    error: ResendErrorBody | None = None


class ResendClient:
    """Credentials-bound handle for the Resend API.

    A fresh ``httpx.AsyncClient`` is opened per call, so a handle can be
    reused across event loops. Pass ``transport`` to route requests through
    ``httpx.MockTransport`` in tests.

    Example:
        >>> client = ResendClient("re_123")
        >>> client.base_url
        'https://api.resend.com'
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    def __repr__(self) -> str:
        return f"ResendClient(base_url={self.base_url!r}, timeout={self.timeout!r})"

    def _session(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
                "User-Agent": f"{__init__conf__.name}/{__init__conf__.version}",
            },
        )

    async def list_domains(self) -> list[dict[str, Any]]:
        """Return the sending domains owned by the API key.

        Raises:
            ResendApiError: When the API answers with an error status.
            httpx.HTTPError: When the request could not be completed.
        """
        async with self._session() as http:
            response = await http.get("/domains")
        logger.debug("Resend domains probe answered", extra={"status_code": response.status_code})
        if response.is_error:
            raise ResendApiError.from_response(response)
        body: Any = response.json()
        if isinstance(body, dict):
            return list(cast(dict[str, Any], body).get("data") or [])
        return []

    async def send_email(self, payload: dict[str, Any]) -> ResendResponse:
        """Submit a message and return the vendor's envelope.

        Args:
            payload: JSON body with ``from``, ``to``, ``subject``, ``html``, ``text``.

        Raises:
            httpx.HTTPError: When the request could not be completed.
        """
        async with self._session() as http:
            response = await http.post("/emails", json=payload)
        logger.debug("Resend send answered", extra={"status_code": response.status_code})
        if response.is_error:
            return ResendResponse(error=ResendErrorBody.from_response(response))
        body: Any = response.json()
        return ResendResponse(data=cast(dict[str, Any], body) if isinstance(body, dict) else {})


def build_resend_client(config: ResendConfig) -> ResendClient:
    """Construct a client from validated settings.

    Callers must check ``config.is_configured`` first.
    """
    return ResendClient(cast(str, config.api_key), base_url=config.base_url, timeout=config.timeout)


__all__ = [
    "ResendApiError",
    "ResendClient",
    "ResendErrorBody",
    "ResendResponse",
    "build_resend_client",
]
