"""Logging adapter - lib_log_rich setup.

Contents:
    * :func:`.setup.init_logging` - Idempotent logging initialization
    * :func:`.setup.get_logger` - Logger injected into runners
"""

from __future__ import annotations

from .setup import get_logger, init_logging

__all__ = ["get_logger", "init_logging"]
