"""In-memory adapter implementations for testing.

Provides lightweight implementations of the application ports that operate
entirely in memory -- no filesystem, no logging framework, no process exit.

Contents:
    * :mod:`.config` - In-memory configuration adapter
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.exit` - Recording exit strategy
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .exit import RecordingExit
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from progshell.application.ports import ExitStrategy, GetConfig, InitLogging

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_exit: ExitStrategy = RecordingExit()

__all__ = [
    "RecordingExit",
    "get_config_in_memory",
    "init_logging_in_memory",
]
