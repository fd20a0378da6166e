"""Configuration-guarded gateway to the Resend API.

The gateway is constructed once by the composition root and passed to
every call site. It builds its vendor client lazily, on first use, and
only when the settings are complete.

Contents:
    * :class:`EmailGateway` - ``is_configured``, ``get_client``,
      ``test_connection`` and ``send_email``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, cast

import httpx

from resend_gateway.domain.behaviors import PROVIDER, fallback_message_id
from resend_gateway.domain.classification import classify_failure, describe_send_failure, is_unauthorized
from resend_gateway.domain.errors import ApiError
from resend_gateway.domain.models import ConnectionTestResult, EmailMessage, SendResult

from .client import ResendApiError, build_resend_client
from .config import ResendConfig

if TYPE_CHECKING:
    from resend_gateway.application.ports import ClientFactory, ResendTransport

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = (
    "Resend is not configured. Please set RESEND_API_KEY and RESEND_FROM_EMAIL in environment variables."
)


def _status_code(exc: BaseException) -> int | None:
    return exc.status_code if isinstance(exc, ResendApiError) else None


def _is_outage(exc: BaseException) -> bool:
    """Failures that say nothing about the credentials: network errors and 5xx answers."""
    if isinstance(exc, httpx.TransportError):
        return True
    return isinstance(exc, ResendApiError) and exc.is_server_error


class EmailGateway:
    """Lazily-built vendor client guarded by configuration validation.

    Args:
        config: Validated Resend settings.
        client_factory: Builds the vendor client on first use. Defaults to the
            httpx-backed :class:`~resend_gateway.adapters.resend.client.ResendClient`.

    Example:
        >>> gateway = EmailGateway(ResendConfig())
        >>> gateway.is_configured()
        False
        >>> gateway.get_client()  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ServiceUnavailableError: Resend is not configured...
    """

    def __init__(self, config: ResendConfig, *, client_factory: ClientFactory | None = None) -> None:
        self._config = config
        self._client_factory: ClientFactory = client_factory or build_resend_client
        self._client: ResendTransport | None = None

    @property
    def config(self) -> ResendConfig:
        return self._config

    def is_configured(self) -> bool:
        """Return True when the API key and sender are set and not placeholders."""
        return self._config.is_configured

    def get_client(self) -> ResendTransport:
        """Return the cached client, building it on first use.

        Raises:
            ServiceUnavailableError: When the settings are incomplete. Raised
                before any client construction.
        """
        if not self.is_configured():
            raise ApiError.service_unavailable(NOT_CONFIGURED_MESSAGE)
        if self._client is None:
            self._client = self._client_factory(self._config)
            logger.debug("Resend client initialised", extra={"base_url": self._config.base_url})
        return self._client

    async def test_connection(self) -> ConnectionTestResult:
        """Probe the credentials with a read-only vendor call.

        Never raises. A rejected key (401/unauthorized) reports
        ``configured=False``; any other vendor error is reported as a warning
        on an otherwise valid configuration. Network failures and 5xx answers
        are reported as a failed connection.
        """
        try:
            if not self.is_configured():
                return ConnectionTestResult(configured=False, message="Resend API key not configured")

            client = self.get_client()
            try:
                await client.list_domains()
            except Exception as exc:
                if _is_outage(exc):
                    raise
                return self._probe_failure(exc)

            return ConnectionTestResult(
                configured=True,
                message="Resend connection successful",
                provider=PROVIDER,
                from_email=self._config.from_email,
            )
        except Exception as exc:
            logger.error("Resend connection test failed", extra={"error": str(exc)}, exc_info=True)
            return ConnectionTestResult(configured=False, message=f"Resend connection failed: {exc}")

    def _probe_failure(self, exc: Exception) -> ConnectionTestResult:
        text = str(exc)
        if is_unauthorized(text, _status_code(exc)):
            logger.warning("Resend rejected the API key", extra={"error": text})
            return ConnectionTestResult(configured=False, message="Invalid Resend API key")

        logger.warning("Resend probe failed; API key assumed valid", extra={"error": text})
        return ConnectionTestResult(
            configured=True,
            message="Resend API key appears valid",
            provider=PROVIDER,
            from_email=self._config.from_email,
            warning=text,
        )

    async def send_email(
        self,
        to: str | Sequence[str],
        subject: str,
        html: str,
        text: str | None = None,
    ) -> SendResult:
        """Send one message through the vendor.

        Args:
            to: Single address or sequence of addresses.
            subject: Subject line.
            html: HTML body.
            text: Plain-text body. Derived from ``html`` by removing tags when omitted.

        Returns:
            Successful send outcome with the vendor message id, or a locally
            generated ``resend-<epoch millis>`` id when the vendor returned none.

        Raises:
            ServiceUnavailableError: When the settings are incomplete.
            InternalError: When the send failed for any reason; the message
                classifies the cause and the original error is chained.
        """
        client = self.get_client()

        try:
            message = EmailMessage.build(
                to=to,
                subject=subject,
                html=html,
                text=text,
                from_email=cast(str, self._config.from_email),
                from_name=self._config.from_name,
            )
            logger.info("Sending email", extra={"recipients": message.to, "subject": subject})
            response = await client.send_email(message.to_payload())
            if response.error is not None:
                raise ResendApiError(
                    response.error.message or "Resend API error",
                    status_code=response.error.status_code,
                    name=response.error.name,
                )
        except Exception as exc:
            logger.error(
                "Resend email sending error",
                extra={"error": str(exc), "error_type": type(exc).__name__},
                exc_info=True,
            )
            category = classify_failure(str(exc), _status_code(exc))
            raise ApiError.internal_error(describe_send_failure(category, str(exc))) from exc

        data = response.data or {}
        result = SendResult(
            message_id=str(data.get("id") or fallback_message_id()),
            to=message.to,
            subject=subject,
            provider=PROVIDER,
        )
        logger.info("Email sent successfully", extra={"recipients": result.to, "message_id": result.message_id})
        return result


__all__ = [
    "NOT_CONFIGURED_MESSAGE",
    "EmailGateway",
]
