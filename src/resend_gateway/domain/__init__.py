"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Message shaping helpers (sender, recipients, HTML to text)
    * :mod:`.classification` - Vendor failure classification
    * :mod:`.enums` - Domain enumerations (OutputFormat, FailureCategory)
    * :mod:`.errors` - Domain exception types
    * :mod:`.models` - Message and result value objects
"""

from __future__ import annotations

from .behaviors import (
    DEFAULT_FROM_NAME,
    PROVIDER,
    fallback_message_id,
    format_sender,
    html_to_text,
    normalize_recipients,
)
from .classification import classify_failure, describe_send_failure, is_unauthorized
from .enums import FailureCategory, OutputFormat
from .errors import ApiError, InternalError, ServiceUnavailableError
from .models import ConnectionTestResult, EmailMessage, SendResult

__all__ = [
    # Behaviors
    "DEFAULT_FROM_NAME",
    "PROVIDER",
    "fallback_message_id",
    "format_sender",
    "html_to_text",
    "normalize_recipients",
    # Classification
    "classify_failure",
    "describe_send_failure",
    "is_unauthorized",
    # Enums
    "FailureCategory",
    "OutputFormat",
    # Errors
    "ApiError",
    "InternalError",
    "ServiceUnavailableError",
    # Models
    "ConnectionTestResult",
    "EmailMessage",
    "SendResult",
]
