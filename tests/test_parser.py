"""Parser stories: version short-circuit, help, malformed input, option model."""

from __future__ import annotations

import pytest

from progshell import __init__conf__
from progshell.adapters.cli.parser import build_parser, options_from_params, parse_options
from progshell.adapters.memory import RecordingExit
from progshell.domain.errors import ParseError
from progshell.domain.options import Options

COMMANDS = ("info", "run")


# ---------------------------------------------------------------------------
# --version is answered while parsing
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_version_flag_prints_unknown_and_requests_exit_zero(
    recording_exit: RecordingExit,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """--version prints exactly 'unknown\\n' and requests exit code 0."""
    result = parse_options(["--version"], commands=COMMANDS, exit_strategy=recording_exit)

    assert result is None
    assert capsys.readouterr().out == "unknown\n"
    assert recording_exit.codes == [0]


@pytest.mark.os_agnostic
def test_version_output_matches_package_metadata(
    recording_exit: RecordingExit,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """The printed version is the package metadata version."""
    parse_options(["--version"], commands=COMMANDS, exit_strategy=recording_exit)

    assert capsys.readouterr().out == f"{__init__conf__.version}\n"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "argv",
    [
        ["--traceback", "--version"],
        ["--version", "--debug"],
        ["--profile", "staging", "--version"],
        ["--version", "info"],
        ["--set", "lib_log_rich.console_level=DEBUG", "--version", "run"],
    ],
)
def test_version_flag_wins_over_other_valid_flags(
    argv: list[str],
    recording_exit: RecordingExit,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """--version short-circuits regardless of other valid flags around it."""
    result = parse_options(argv, commands=COMMANDS, exit_strategy=recording_exit)

    assert result is None
    assert capsys.readouterr().out == "unknown\n"
    assert recording_exit.code == 0


@pytest.mark.os_agnostic
@pytest.mark.parametrize("flag", ["--help", "-h"])
def test_help_flag_prints_usage_and_requests_exit_zero(
    flag: str,
    recording_exit: RecordingExit,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """--help short-circuits like --version."""
    result = parse_options([flag], commands=COMMANDS, exit_strategy=recording_exit)

    assert result is None
    assert "Usage" in capsys.readouterr().out
    assert recording_exit.code == 0


# ---------------------------------------------------------------------------
# Malformed input
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("argv", "fragment"),
    [
        (["--bogus-flag"], "--bogus-flag"),
        (["run", "extra"], "extra"),
        (["deploy"], "deploy"),
        (["--profile"], "--profile"),
        (["--set", "novalue"], "must contain '='"),
        (["--set", "nodot=1"], "at least one dot"),
        (["--profile", "../etc/passwd"], ""),
        (["--debug", "--quiet"], "mutually exclusive"),
        (["--set", "a.b=1", "--set", "a.b.c=2"], "Expected dict at key 'b'"),
    ],
)
def test_malformed_arguments_raise_parse_error_without_exit(
    argv: list[str],
    fragment: str,
    recording_exit: RecordingExit,
) -> None:
    """Malformed input raises ParseError and never requests an exit itself."""
    with pytest.raises(ParseError) as exc_info:
        parse_options(argv, commands=COMMANDS, exit_strategy=recording_exit)

    assert fragment in str(exc_info.value)
    assert recording_exit.codes == []


@pytest.mark.os_agnostic
def test_bogus_flag_before_version_is_still_a_parse_error(recording_exit: RecordingExit) -> None:
    """Unknown flags are rejected before eager flags are processed."""
    with pytest.raises(ParseError, match="bogus"):
        parse_options(["--bogus-flag", "--version"], commands=COMMANDS, exit_strategy=recording_exit)

    assert not recording_exit.called


@pytest.mark.os_agnostic
def test_parse_error_chains_the_click_exception(recording_exit: RecordingExit) -> None:
    """The original Click exception stays available as the cause."""
    import click

    with pytest.raises(ParseError) as exc_info:
        parse_options(["--bogus-flag"], commands=COMMANDS, exit_strategy=recording_exit)

    assert isinstance(exc_info.value.__cause__, click.ClickException)


# ---------------------------------------------------------------------------
# Successful parsing
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_empty_argv_selects_default_command(recording_exit: RecordingExit) -> None:
    """No arguments yields default Options and no exit request."""
    result = parse_options([], commands=COMMANDS, exit_strategy=recording_exit)

    assert result == Options()
    assert not recording_exit.called


@pytest.mark.os_agnostic
def test_all_flags_are_carried_into_options(recording_exit: RecordingExit) -> None:
    """Every recognised flag lands in the frozen Options."""
    result = parse_options(
        ["--traceback", "--profile", "staging", "--set", "a.b=1", "--set", "c.d=x", "--debug", "info"],
        commands=COMMANDS,
        exit_strategy=recording_exit,
    )

    assert result == Options(
        command="info",
        traceback=True,
        profile="staging",
        set_overrides=("a.b=1", "c.d=x"),
        debug=True,
    )


@pytest.mark.os_agnostic
def test_options_are_immutable(recording_exit: RecordingExit) -> None:
    """Parsed Options cannot be modified."""
    import dataclasses

    result = parse_options(["--quiet"], commands=COMMANDS, exit_strategy=recording_exit)
    assert result is not None

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.quiet = False  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_schema_only_accepts_registered_commands() -> None:
    """The command argument is restricted to the registry."""
    schema = build_parser(["run"])
    command_param = next(param for param in schema.params if param.name == "command")

    assert list(command_param.type.choices) == ["run"]  # type: ignore[attr-defined]


@pytest.mark.os_agnostic
def test_options_from_params_defaults_missing_values() -> None:
    """Missing parameters fall back to Options defaults."""
    assert options_from_params({}) == Options()


@pytest.mark.os_agnostic
def test_options_from_params_wraps_invalid_profile() -> None:
    """An invalid profile becomes a ParseError."""
    with pytest.raises(ParseError):
        options_from_params({"profile": "a" * 200})
