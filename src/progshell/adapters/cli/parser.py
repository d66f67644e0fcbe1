"""Command-line schema and parser producing :class:`Options`.

Contents:
    * :func:`build_parser` - rich-click command describing every recognised flag.
    * :func:`parse_options` - parse an argv tail into Options, or short-circuit.
    * :func:`options_from_params` - validate Click parameters into Options.

System Role:
    Parsing only builds a Click context; it never invokes a command. Eager
    flags (``--version``, ``--help``) answer the request while parsing and
    ask the exit strategy to terminate, so no runner is ever reached.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import rich_click as click
from click.exceptions import ClickException, Exit

from progshell import __init__conf__
from progshell.adapters.config.loader import validate_profile
from progshell.adapters.config.overrides import validate_overrides
from progshell.application.ports import ExitStrategy
from progshell.domain.errors import ParseError
from progshell.domain.options import DEFAULT_COMMAND, Options

from .constants import CLICK_CONTEXT_SETTINGS


def _print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print the bare version string and stop parsing."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(__init__conf__.version)
    ctx.exit(0)


def build_parser(commands: Iterable[str]) -> click.Command:
    """Build the command schema for the registered runner names.

    Args:
        commands: Names accepted for the optional ``COMMAND`` argument.

    Example:
        >>> schema = build_parser(["run", "info"])
        >>> sorted(param.name for param in schema.params)
        ['command', 'debug', 'profile', 'quiet', 'set_overrides', 'traceback', 'version']
    """
    choices = sorted(set(commands))

    @click.command(
        name=__init__conf__.shell_command,
        help=__init__conf__.title,
        context_settings=CLICK_CONTEXT_SETTINGS,
    )
    @click.option(
        "--version",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_print_version,
        help="Show the version and exit",
    )
    @click.option(
        "--traceback/--no-traceback",
        is_flag=True,
        default=False,
        help="Show full Python traceback on errors",
    )
    @click.option(
        "--profile",
        type=str,
        default=None,
        help="Load configuration from a named profile (e.g., 'production', 'test')",
    )
    @click.option(
        "--set",
        "set_overrides",
        multiple=True,
        default=(),
        metavar="SECTION.KEY=VALUE",
        help="Override a configuration setting (repeatable).",
    )
    @click.option("--debug", is_flag=True, default=False, help="Show debugging output")
    @click.option("--quiet", is_flag=True, default=False, help="Only show warnings and errors")
    @click.argument("command", required=False, default=DEFAULT_COMMAND, type=click.Choice(choices))
    def schema(**_params: Any) -> None:
        """Parsing schema only; runners are dispatched by the driver."""

    return schema


def options_from_params(params: Mapping[str, Any]) -> Options:
    """Validate parsed Click parameters and freeze them into Options.

    Raises:
        ParseError: For mutually exclusive log flags, an invalid profile,
            or a malformed ``--set`` override.

    Example:
        >>> options_from_params({"command": "info", "quiet": True}).console_level
        'WARNING'
        >>> options_from_params({"debug": True, "quiet": True})
        Traceback (most recent call last):
        ...
        progshell.domain.errors.ParseError: --debug and --quiet are mutually exclusive
    """
    debug = bool(params.get("debug", False))
    quiet = bool(params.get("quiet", False))
    if debug and quiet:
        raise ParseError("--debug and --quiet are mutually exclusive")

    profile: str | None = params.get("profile")
    set_overrides = tuple(params.get("set_overrides", ()))
    try:
        if profile is not None:
            validate_profile(profile)
        validate_overrides(set_overrides)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc

    return Options(
        command=params.get("command") or DEFAULT_COMMAND,
        traceback=bool(params.get("traceback", False)),
        profile=profile,
        set_overrides=set_overrides,
        debug=debug,
        quiet=quiet,
    )


def parse_options(
    argv: Sequence[str],
    *,
    commands: Iterable[str],
    exit_strategy: ExitStrategy,
) -> Options | None:
    """Parse ``argv`` (without the program name) into Options.

    ``--version`` prints the version followed by a newline and ``--help``
    prints usage; both request ``exit_strategy.exit(0)`` and return
    ``None``. A real exit strategy does not return, a recording one does.

    Args:
        argv: Argument tail, e.g. ``sys.argv[1:]``.
        commands: Registered runner names.
        exit_strategy: Receives the exit request of a short-circuit.

    Returns:
        Parsed options, or ``None`` after a short-circuit.

    Raises:
        ParseError: If the arguments are malformed. The exit strategy is
            not called.
    """
    schema = build_parser(commands)
    try:
        ctx = schema.make_context(__init__conf__.shell_command, list(argv))
    except Exit as exc:
        exit_strategy.exit(exc.exit_code)
        return None
    except ClickException as exc:
        raise ParseError(exc.format_message()) from exc
    return options_from_params(ctx.params)


__all__ = [
    "build_parser",
    "options_from_params",
    "parse_options",
]
