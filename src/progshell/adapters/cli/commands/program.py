"""Default runner executed when no command is given."""

from __future__ import annotations

import logging
from typing import ClassVar

from progshell.domain.cancellation import CancellationToken
from progshell.domain.enums import Capability
from progshell.domain.errors import CancelledError, RunnerError
from progshell.domain.options import DEFAULT_COMMAND


class ProgramRunner:
    """Program entry point; currently performs no work and succeeds.

    Example:
        >>> ProgramRunner().run(token=CancellationToken(), logger=logging.getLogger("doc"))
    """

    name: ClassVar[str] = DEFAULT_COMMAND
    requires: ClassVar[frozenset[Capability]] = frozenset({Capability.CANCELLATION, Capability.LOGGER})

    def run(self, *, token: CancellationToken, logger: logging.Logger) -> None:
        try:
            token.raise_if_cancelled()
        except CancelledError as exc:
            raise RunnerError(f"cancelled: {exc}") from exc
        logger.debug("Nothing to do")


__all__ = ["ProgramRunner"]
