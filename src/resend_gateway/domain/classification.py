"""Classify vendor failures into operator-facing categories.

The vendor reports failures as an HTTP status plus free text. A status is
trusted first; when only text is available the first matching substring
rule wins, in the order listed in :data:`_TEXT_RULES`.
"""

from __future__ import annotations

from .enums import FailureCategory

_TEXT_RULES: tuple[tuple[str, FailureCategory], ...] = (
    ("401", FailureCategory.INVALID_API_KEY),
    ("403", FailureCategory.FORBIDDEN),
    ("domain", FailureCategory.INVALID_DOMAIN),
)

_STATUS_RULES: dict[int, FailureCategory] = {
    401: FailureCategory.INVALID_API_KEY,
    403: FailureCategory.FORBIDDEN,
}


def classify_failure(text: str, status_code: int | None = None) -> FailureCategory:
    """Map a failure to a :class:`FailureCategory`.

    Args:
        text: Raw error text as reported by the vendor or the transport.
        status_code: HTTP status when the failure came from a response.

    Example:
        >>> classify_failure("Resend API error 401: API key is invalid")
        <FailureCategory.INVALID_API_KEY: 'invalid_api_key'>
        >>> classify_failure("The example.com domain is not verified")
        <FailureCategory.INVALID_DOMAIN: 'invalid_domain'>
        >>> classify_failure("missing scope", status_code=403)
        <FailureCategory.FORBIDDEN: 'forbidden'>
        >>> classify_failure("connection reset")
        <FailureCategory.GENERIC: 'generic'>
    """
    if status_code in _STATUS_RULES:
        return _STATUS_RULES[status_code]
    for needle, category in _TEXT_RULES:
        if needle in text:
            return category
    return FailureCategory.GENERIC


def is_unauthorized(text: str, status_code: int | None = None) -> bool:
    """Return True when a probe failure means the API key was rejected.

    Example:
        >>> is_unauthorized("request unauthorized")
        True
        >>> is_unauthorized("not permitted")
        False
        >>> is_unauthorized("", status_code=401)
        True
    """
    return status_code == 401 or "401" in text or "unauthorized" in text


def describe_send_failure(category: FailureCategory, text: str) -> str:
    """Return the message carried by the ``InternalError`` for a failed send.

    Example:
        >>> describe_send_failure(FailureCategory.GENERIC, "timeout")
        'Failed to send email via Resend: timeout'
        >>> describe_send_failure(FailureCategory.INVALID_DOMAIN, "x").startswith("Invalid sender domain")
        True
    """
    if category is FailureCategory.INVALID_API_KEY:
        return "Invalid Resend API key. Please check your RESEND_API_KEY environment variable."
    if category is FailureCategory.FORBIDDEN:
        return "Resend API access forbidden. Please check your API key permissions."
    if category is FailureCategory.INVALID_DOMAIN:
        return "Invalid sender domain. Please verify your domain in Resend dashboard or use a verified domain."
    return f"Failed to send email via Resend: {text}"


__all__ = [
    "classify_failure",
    "describe_send_failure",
    "is_unauthorized",
]
