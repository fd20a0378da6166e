"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ApiError(Exception):
    """Structured error surfaced to callers outside the gateway.

    Carries an HTTP-style ``status_code`` so web layers can translate it
    directly into a response. Use the named constructors rather than
    instantiating the subclasses by hand.

    Example:
        >>> from resend_gateway.domain.errors import ApiError
        >>> err = ApiError.service_unavailable("Resend is not configured")
        >>> err.status_code, str(err)
        (503, 'Resend is not configured')
        >>> isinstance(ApiError.internal_error("boom"), InternalError)
        True
    """

    status_code: int = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    @classmethod
    def service_unavailable(cls, message: str) -> ServiceUnavailableError:
        """Build the error raised when configuration is missing or a placeholder."""
        return ServiceUnavailableError(message)

    @classmethod
    def internal_error(cls, message: str) -> InternalError:
        """Build the error raised when delivery failed after a network attempt."""
        return InternalError(message)


class ServiceUnavailableError(ApiError):
    """Email service is not configured.

    Raised before any client construction or network attempt.

    Example:
        >>> ServiceUnavailableError("missing key").status_code
        503
    """

    status_code = 503


class InternalError(ApiError):
    """Email delivery failed.

    The message is an operator-friendly classification of the underlying
    cause; the vendor exception is kept in ``__cause__``.

    Example:
        >>> InternalError("Failed to send email via Resend: timeout").status_code
        500
    """

    status_code = 500


__all__ = [
    "ApiError",
    "InternalError",
    "ServiceUnavailableError",
]
