"""CLI entry point and execution wrapper.

Drives one invocation: parse the argument tail, load configuration, start
logging, build the dependency container, dispatch the selected runner and
hand the resulting exit code to the exit strategy exactly once.

Contents:
    * :func:`main` - Primary entry point for CLI execution.
"""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from progshell import __init__conf__
from progshell.adapters.config.overrides import apply_overrides
from progshell.adapters.config.settings import build_cancellation_token
from progshell.application.container import build_container
from progshell.application.dispatch import dispatch
from progshell.application.lifecycle import Invocation
from progshell.domain.enums import RunState
from progshell.domain.errors import ConfigurationError, ParseError, RunnerError
from progshell.domain.options import Options

from .constants import RUNNER_FAILED_MESSAGE, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .exit import ProcessExit
from .exit_codes import ExitCode
from .parser import parse_options
from .tracebacks import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from progshell.application.ports import ExitStrategy
    from progshell.composition import AppServices

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _ExitLatch:
    """Forward at most one exit request to the wrapped strategy."""

    target: ExitStrategy
    code: int | None = None

    def exit(self, code: int) -> None:
        if self.code is not None:
            raise RuntimeError(f"Exit already requested with code {self.code}; refusing {code}")
        self.code = code
        self.target.exit(code)


def _describe_invalid_settings(exc: ValidationError) -> str:
    """Summarise a settings validation error as ``section.key: message`` pairs.

    Example:
        >>> from progshell.adapters.config.settings import RuntimeSettingsModel
        >>> try:
        ...     RuntimeSettingsModel(timeout_seconds=-1)
        ... except ValidationError as exc:
        ...     print(_describe_invalid_settings(exc))  # doctest: +ELLIPSIS
        progshell.timeout_seconds: Input should be greater than or equal to ...
    """
    return "; ".join(
        f"{__init__conf__.name}.{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )


def _execute(options: Options, services: AppServices, invocation: Invocation) -> int:
    """Build the container for ``options`` and run the selected runner.

    Invalid values in the ``[progshell]`` section, whether from a file or a
    ``--set`` override, are reported like malformed input.
    """
    config = services.get_config(profile=options.profile)
    config = apply_overrides(config, options.effective_overrides())
    try:
        token = build_cancellation_token(config)
    except ValidationError as exc:
        invocation.advance(RunState.FAILED)
        click.echo(f"Error: Invalid configuration: {_describe_invalid_settings(exc)}", err=True)
        return ExitCode.GENERAL_ERROR
    services.init_logging(config)

    runner = services.runners.get(options.command)
    if runner is None:
        raise ConfigurationError(f"No runner registered for command {options.command!r}")

    run_logger = services.get_logger()
    container = build_container(
        token=token,
        logger=run_logger,
        options=options,
    )
    try:
        dispatch(runner, container, invocation=invocation)
    except RunnerError as exc:
        run_logger.error(RUNNER_FAILED_MESSAGE, extra={"command": runner.name, "error": str(exc)})
        return ExitCode.GENERAL_ERROR
    return ExitCode.SUCCESS


def _run_cli(
    argv: Sequence[str],
    *,
    services_factory: Callable[[], AppServices],
    exit_strategy: ExitStrategy,
) -> int:
    """Execute one invocation with exception handling.

    Args:
        argv: Argument tail without the program name.
        services_factory: Factory returning AppServices.
        exit_strategy: Strategy the parser uses for short-circuits.

    Returns:
        Exit code for the invocation.
    """
    services = services_factory()
    invocation = Invocation()

    try:
        options = parse_options(argv, commands=services.runners, exit_strategy=exit_strategy)
    except ParseError as exc:
        invocation.advance(RunState.FAILED)
        click.echo(f"Error: {exc}", err=True)
        return ExitCode.GENERAL_ERROR

    if options is None:
        invocation.advance(RunState.SHORT_CIRCUITED)
        return ExitCode.SUCCESS

    invocation.advance(RunState.PARSED)
    apply_traceback_preferences(options.traceback)
    try:
        return _execute(options, services, invocation)
    except BaseException as exc:
        # Everything that is not a runner-reported failure crosses this
        # boundary, including KeyboardInterrupt and SystemExit raised by a runner.
        if not invocation.state.is_terminal:
            invocation.advance(RunState.FAILED)
        tracebacks_enabled = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
        length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
        return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        logger.debug("Invocation finished in state %s", invocation.state.value)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
    exit_strategy: ExitStrategy | None = None,
) -> int:
    """Run one CLI invocation and request its exit code.

    Provides the single entry point used by console scripts and
    ``python -m`` execution so that behaviour stays identical across
    transports. The exit strategy receives exactly one request: from the
    parser for ``--version``/``--help``, otherwise from here once the
    invocation finished.

    Args:
        argv: Optional sequence of CLI arguments. None uses ``sys.argv[1:]``.
        restore_traceback: Whether to restore prior traceback configuration after execution.
        services_factory: Factory function returning AppServices. Required.
            Callers outside the adapters layer should pass ``build_production``.
        exit_strategy: Termination strategy. Defaults to :class:`ProcessExit`,
            which does not return.

    Returns:
        The exit code requested, when the strategy returns at all.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from progshell.adapters.memory import RecordingExit
        >>> from progshell.composition import build_testing
        >>> recorder = RecordingExit()
        >>> main(["--version"], services_factory=build_testing, exit_strategy=recorder)
        unknown
        0
        >>> recorder.codes
        [0]
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    latch = _ExitLatch(exit_strategy if exit_strategy is not None else ProcessExit())
    args = list(argv) if argv is not None else sys.argv[1:]

    previous_state = snapshot_traceback_state()
    try:
        code = _run_cli(args, services_factory=services_factory, exit_strategy=latch)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Only shutdown logging from main thread to avoid killing logging for other threads.
        is_main_thread = threading.current_thread() is threading.main_thread()
        if is_main_thread and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()

    if latch.code is not None:
        return latch.code
    latch.exit(int(code))
    return int(code)


__all__ = ["main"]
