"""Package metadata and PEP 561 marker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    return rtoml.load(PYPROJECT_PATH)


def _wheel_packages() -> list[str]:
    pyproject = _load_pyproject()
    tool_table = cast(dict[str, Any], pyproject.get("tool", {}))
    hatch_table = cast(dict[str, Any], tool_table.get("hatch", {}))
    targets_table = cast(dict[str, Any], cast(dict[str, Any], hatch_table.get("build", {})).get("targets", {}))
    wheel_table = cast(dict[str, Any], targets_table.get("wheel", {}))
    return cast(list[str], wheel_table.get("packages", []))


@pytest.mark.os_agnostic
def test_print_info_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    from progshell import print_info

    print_info()

    captured = capsys.readouterr().out
    assert captured.startswith("Info for progshell:")
    assert "version" in captured


@pytest.mark.os_agnostic
def test_metadata_constants_match_project() -> None:
    """Static metadata agrees with the project table."""
    from progshell import __init__conf__

    project = cast(dict[str, Any], _load_pyproject()["project"])
    scripts = cast(dict[str, str], project["scripts"])

    assert __init__conf__.name == project["name"]
    assert __init__conf__.shell_command in scripts
    assert __init__conf__.LAYEREDCONF_SLUG == __init__conf__.name


@pytest.mark.os_agnostic
def test_unstamped_version_reports_unknown() -> None:
    """Development checkouts print 'unknown' for --version."""
    from progshell import __init__conf__

    assert __init__conf__.version == "unknown"


@pytest.mark.os_agnostic
def test_py_typed_marker_ships_with_the_package() -> None:
    """PEP 561 marker sits inside the wheel package directory."""
    packages = _wheel_packages()

    assert packages, "wheel target must list the package directory"
    assert (PROJECT_ROOT / packages[0] / "py.typed").is_file()


@pytest.mark.os_agnostic
def test_runtime_dependencies_are_declared() -> None:
    """Every third-party library imported by the package is a declared dependency."""
    project = cast(dict[str, Any], _load_pyproject()["project"])
    declared = {entry.split(">")[0].split("=")[0].strip().lower().replace("_", "-") for entry in project["dependencies"]}

    assert {
        "click",
        "rich-click",
        "lib-cli-exit-tools",
        "lib-log-rich",
        "lib-layered-config",
        "pydantic",
        "orjson",
    } <= declared


@pytest.mark.os_agnostic
def test_every_runtime_dependency_has_a_version_floor() -> None:
    project = cast(dict[str, Any], _load_pyproject()["project"])

    assert all(">=" in entry for entry in project["dependencies"])
