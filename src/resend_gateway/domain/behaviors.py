"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

import re
import time
from collections.abc import Sequence

PROVIDER = "resend"
DEFAULT_FROM_NAME = "Argument Graph"

_HTML_TAG = re.compile(r"<[^>]*>")


def html_to_text(html: str) -> str:
    """Derive a plain-text body by removing every HTML tag.

    Entities and whitespace are left untouched.

    Example:
        >>> html_to_text("<p>Hello <b>world</b></p>")
        'Hello world'
        >>> html_to_text("no markup")
        'no markup'
    """
    return _HTML_TAG.sub("", html)


def normalize_recipients(to: str | Sequence[str]) -> list[str]:
    """Return recipients as a list, wrapping a single address.

    Example:
        >>> normalize_recipients("a@example.com")
        ['a@example.com']
        >>> normalize_recipients(("a@example.com", "b@example.com"))
        ['a@example.com', 'b@example.com']
    """
    if isinstance(to, str):
        return [to]
    return list(to)


def format_sender(from_name: str | None, from_email: str) -> str:
    """Build the ``From`` header value.

    Example:
        >>> format_sender("Argument Graph", "hello@example.com")
        'Argument Graph <hello@example.com>'
        >>> format_sender(None, "hello@example.com")
        'Argument Graph <hello@example.com>'
    """
    return f"{from_name or DEFAULT_FROM_NAME} <{from_email}>"


def fallback_message_id(now_ms: int | None = None) -> str:
    """Locally generated id used when the vendor returns none.

    Example:
        >>> fallback_message_id(1700000000000)
        'resend-1700000000000'
    """
    millis = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"{PROVIDER}-{millis}"


__all__ = [
    "DEFAULT_FROM_NAME",
    "PROVIDER",
    "fallback_message_id",
    "format_sender",
    "html_to_text",
    "normalize_recipients",
]
