"""Shared pytest fixtures for parser, container, dispatch and entry tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from lib_layered_config import Config

from progshell.adapters.memory import RecordingExit
from progshell.domain.enums import Capability

if TYPE_CHECKING:
    from progshell.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


def _empty_calls() -> list[dict[str, Any]]:
    return []


@dataclass
class SpyRunner:
    """Runner double recording every injected call.

    Attributes:
        name: Command name the spy is registered under.
        requires: Capabilities the spy declares.
        error: Raised from ``run`` after recording the call, when set.
        calls: Keyword arguments received by each ``run`` call.
    """

    name: str = "run"
    requires: frozenset[Capability] = frozenset(Capability)
    error: BaseException | None = None
    calls: list[dict[str, Any]] = field(default_factory=_empty_calls)

    def run(self, **injected: Any) -> None:
        self.calls.append(injected)
        if self.error is not None:
            raise self.error

    @property
    def invoked(self) -> bool:
        return bool(self.calls)


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string.

    Example:
        def test_output(strip_ansi: Callable[[str], str]) -> None:
            assert strip_ansi("\\x1b[1mbold\\x1b[0m") == "bold"
    """

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test."""
    from progshell.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def recording_exit() -> RecordingExit:
    """Provide a fresh exit recorder per test.

    The recorder is handed to the code under test explicitly, so no
    process-wide hook has to be restored afterwards.
    """
    return RecordingExit()


@pytest.fixture
def spy_runner() -> SpyRunner:
    """Provide a spy registered as the default ``run`` command."""
    return SpyRunner()


@pytest.fixture
def services_with() -> Callable[..., Callable[[], AppServices]]:
    """Return a builder for test services wired with the given runners.

    Example:
        def test_run(services_with, spy_runner) -> None:
            factory = services_with(spy_runner)
            main([], services_factory=factory, exit_strategy=RecordingExit())
    """
    from progshell.composition import AppServices, build_testing

    def _build(*runners: Any, config: Config | None = None) -> Callable[[], AppServices]:
        def _factory() -> AppServices:
            services = build_testing(runners={runner.name: runner for runner in runners})
            if config is None:
                return services

            def _fake_get_config(**_kwargs: Any) -> Config:
                return config

            return AppServices(
                get_config=_fake_get_config,
                init_logging=services.init_logging,
                get_logger=services.get_logger,
                runners=services.runners,
            )

        return _factory

    return _build
