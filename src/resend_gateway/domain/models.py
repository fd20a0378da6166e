"""Value objects exchanged between the gateway and its callers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .behaviors import format_sender, html_to_text, normalize_recipients


@dataclass(frozen=True, slots=True)
class EmailMessage:
    """Outbound message ready to be handed to the vendor.

    Example:
        >>> msg = EmailMessage.build(
        ...     to="a@example.com",
        ...     subject="Hi",
        ...     html="<p>Hello</p>",
        ...     from_email="noreply@example.org",
        ... )
        >>> msg.to, msg.text, msg.sender
        (['a@example.com'], 'Hello', 'Argument Graph <noreply@example.org>')
    """

    sender: str
    to: list[str]
    subject: str
    html: str
    text: str

    @classmethod
    def build(
        cls,
        *,
        to: str | Sequence[str],
        subject: str,
        html: str,
        from_email: str,
        from_name: str | None = None,
        text: str | None = None,
    ) -> EmailMessage:
        """Normalize recipients, format the sender and derive the text body when absent."""
        return cls(
            sender=format_sender(from_name, from_email),
            to=normalize_recipients(to),
            subject=subject,
            html=html,
            text=text or html_to_text(html),
        )

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body expected by the vendor's send endpoint."""
        return {
            "from": self.sender,
            "to": list(self.to),
            "subject": self.subject,
            "html": self.html,
            "text": self.text,
        }


@dataclass(frozen=True, slots=True)
class SendResult:
    """Outcome of a successful send."""

    message_id: str
    to: list[str]
    subject: str
    provider: str
    success: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "message_id": self.message_id,
            "to": list(self.to),
            "subject": self.subject,
            "provider": self.provider,
        }


@dataclass(frozen=True, slots=True)
class ConnectionTestResult:
    """Diagnostic outcome of a credential probe.

    Optional fields are dropped from :meth:`to_dict` when unset.

    Example:
        >>> ConnectionTestResult(configured=False, message="Resend API key not configured").to_dict()
        {'configured': False, 'message': 'Resend API key not configured'}
    """

    configured: bool
    message: str
    provider: str | None = None
    from_email: str | None = None
    warning: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"configured": self.configured, "message": self.message}
        for key in ("provider", "from_email", "warning"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result


__all__ = [
    "ConnectionTestResult",
    "EmailMessage",
    "SendResult",
]
