"""Shared CLI constants.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - Shared Click settings for help display.
    * :data:`TRACEBACK_SUMMARY_LIMIT` - Character budget for truncated tracebacks.
    * :data:`TRACEBACK_VERBOSE_LIMIT` - Character budget for verbose tracebacks.
    * :data:`RUNNER_FAILED_MESSAGE` - Fixed log message for runner failures.
"""

from __future__ import annotations

from typing import Final

#: Shared Click context flags so help output stays consistent.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Character budget used when printing truncated tracebacks.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Character budget used when verbose tracebacks are enabled.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

#: Message logged at error severity when a runner reports failure.
RUNNER_FAILED_MESSAGE: Final[str] = "Program failed"

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "RUNNER_FAILED_MESSAGE",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
