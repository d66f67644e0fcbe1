"""CLI package providing the command-line interface.

Re-exports all public symbols from submodules for convenient access.

Contents:
    * Traceback state management from :mod:`.tracebacks`
    * Parser and option schema from :mod:`.parser`
    * Exit strategy and exit codes from :mod:`.exit` and :mod:`.exit_codes`
    * Entry point from :mod:`.main`
    * Built-in runners from :mod:`.commands`

System Role:
    Acts as the public facade for the CLI subsystem. Consumers import from here
    and remain insulated from internal module boundaries.
"""

from __future__ import annotations

from .commands import InfoRunner, ProgramRunner, builtin_runners
from .constants import (
    CLICK_CONTEXT_SETTINGS,
    RUNNER_FAILED_MESSAGE,
    TRACEBACK_SUMMARY_LIMIT,
    TRACEBACK_VERBOSE_LIMIT,
)
from .exit import ProcessExit
from .exit_codes import ExitCode
from .main import main
from .parser import build_parser, options_from_params, parse_options
from .tracebacks import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "RUNNER_FAILED_MESSAGE",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    # Traceback management
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    # Parsing
    "build_parser",
    "options_from_params",
    "parse_options",
    # Exit handling
    "ExitCode",
    "ProcessExit",
    # Entry point
    "main",
    # Runners
    "InfoRunner",
    "ProgramRunner",
    "builtin_runners",
]
