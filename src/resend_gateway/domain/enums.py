"""Type-safe domain enums for output formats and delivery failure categories."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration and diagnostics display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output.
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class FailureCategory(str, Enum):
    """Cause of a failed vendor call, derived from its status or text.

    Attributes:
        INVALID_API_KEY: Credentials were rejected (401 / unauthorized).
        FORBIDDEN: Credentials lack permission (403).
        INVALID_DOMAIN: Sender domain is not verified with the vendor.
        GENERIC: Anything else.

    Example:
        >>> FailureCategory.FORBIDDEN.value
        'forbidden'
    """

    INVALID_API_KEY = "invalid_api_key"
    FORBIDDEN = "forbidden"
    INVALID_DOMAIN = "invalid_domain"
    GENERIC = "generic"


__all__ = [
    "FailureCategory",
    "OutputFormat",
]
