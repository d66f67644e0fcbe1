"""Exit codes for CLI outcomes.

Provides a single :class:`ExitCode` enum so every exit request carries a
grep-friendly integer instead of a bare literal. Unexpected exceptions are
mapped by ``lib_cli_exit_tools.get_system_exit_code`` instead.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes requested by the driver.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes requested by the driver.

    * 0: success, or a ``--version``/``--help`` short-circuit
    * 1: malformed arguments or a runner-reported failure

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.GENERAL_ERROR)
        1
    """

    SUCCESS = 0
    GENERAL_ERROR = 1


__all__ = ["ExitCode"]
