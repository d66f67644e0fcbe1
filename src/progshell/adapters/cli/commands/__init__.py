"""Built-in runners selectable on the command line.

Contents:
    * :class:`.program.ProgramRunner` - default ``run`` command
    * :class:`.info.InfoRunner` - ``info`` command
    * :func:`builtin_runners` - name → runner registry for the composition root
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from .info import InfoRunner
from .program import ProgramRunner

if TYPE_CHECKING:
    from progshell.application.ports import Runner


def builtin_runners() -> Mapping[str, Runner]:
    """Return a read-only registry of the built-in runners.

    Example:
        >>> sorted(builtin_runners())
        ['info', 'run']
    """
    runners: tuple[Runner, ...] = (ProgramRunner(), InfoRunner())
    return MappingProxyType({runner.name: runner for runner in runners})


__all__ = [
    "InfoRunner",
    "ProgramRunner",
    "builtin_runners",
]
