"""Runner dispatch with capability injection.

Contents:
    * :func:`dispatch` - verify, inject and invoke a runner exactly once.
    * :func:`injected_arguments` - keyword arguments for a runner's declared capabilities.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from typing import Any

import lib_log_rich.runtime

from ..domain.enums import Capability, RunState
from ..domain.errors import RunnerError
from .container import Container
from .lifecycle import Invocation
from .ports import Runner

logger = logging.getLogger(__name__)


def injected_arguments(runner: Runner, container: Container) -> dict[str, Any]:
    """Resolve the capabilities ``runner`` declares into keyword arguments.

    Raises:
        MissingCapabilityError: If any declared capability is unbound.
    """
    container.require(runner.requires)
    return {cap.keyword: container.resolve(cap) for cap in sorted(runner.requires, key=lambda cap: cap.order)}


@contextlib.contextmanager
def _log_scope(command: str) -> Iterator[None]:
    if not lib_log_rich.runtime.is_initialised():
        yield
        return
    with lib_log_rich.runtime.bind(job_id=f"cli-{command}", extra={"command": command}):
        yield


def dispatch(runner: Runner, container: Container, *, invocation: Invocation | None = None) -> None:
    """Invoke ``runner`` with its declared capabilities injected.

    Capabilities are checked before the invocation enters ``RUNNING`` so a
    wiring defect never surfaces as a failure inside the runner. A token
    that is already cancelled stops the run before it starts.

    Args:
        runner: Runner selected by the parsed options.
        container: Frozen per-invocation container.
        invocation: Lifecycle tracker; a fresh one in ``PARSED`` is used
            when omitted.

    Raises:
        MissingCapabilityError: A declared capability is not bound.
        RunnerError: The runner failed or the token was cancelled.
    """
    tracker = invocation if invocation is not None else Invocation([RunState.UNPARSED, RunState.PARSED])
    arguments = injected_arguments(runner, container)

    if Capability.CANCELLATION in container:
        token = container.resolve(Capability.CANCELLATION)
        if token.cancelled:
            tracker.advance(RunState.FAILED)
            raise RunnerError(f"{runner.name} cancelled before start: {token.reason}")

    tracker.advance(RunState.RUNNING)
    logger.debug("Dispatching runner %s with %s", runner.name, sorted(arguments))
    try:
        with _log_scope(runner.name):
            runner.run(**arguments)
    except BaseException:
        tracker.advance(RunState.FAILED)
        raise
    tracker.advance(RunState.SUCCEEDED)


__all__ = [
    "dispatch",
    "injected_arguments",
]
