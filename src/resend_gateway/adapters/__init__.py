"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.resend` - Resend HTTP client, settings and gateway
    * :mod:`.config` - Layered configuration loading, display and overrides
    * :mod:`.logging` - lib_log_rich setup
    * :mod:`.memory` - In-memory fakes for tests
    * :mod:`.cli` - rich-click command-line interface
"""

from __future__ import annotations

__all__: list[str] = []
