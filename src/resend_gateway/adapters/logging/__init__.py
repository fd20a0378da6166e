"""Logging adapter - lib_log_rich runtime setup used by the CLI and ``python -m``."""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "init_logging"]
