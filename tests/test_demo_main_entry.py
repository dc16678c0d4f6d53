from __future__ import annotations

import runpy
from pathlib import Path

import pytest

import termpixel_app.__main__ as demo_main


@pytest.fixture
def recorded_argv(monkeypatch) -> list[list[str]]:
    seen: list[list[str]] = []

    def _fake_cli(argv=None) -> int:
        seen.append(list(argv))
        return 0

    monkeypatch.setattr(demo_main, "_cli_main", _fake_cli)
    return seen


def test_no_arguments_draws_square(recorded_argv) -> None:
    assert demo_main.main([]) == 0
    assert recorded_argv == [["square"]]


@pytest.mark.parametrize(
    "argv",
    [
        ["pattern", "--pattern", "checkerboard"],
        ["benchmark", "--seconds", "1"],
        ["doctor"],
    ],
)
def test_arguments_reach_cli_unchanged(recorded_argv, argv) -> None:
    assert demo_main.main(argv) == 0
    assert recorded_argv == [argv]


def test_sys_argv_used_when_argv_omitted(recorded_argv, monkeypatch) -> None:
    monkeypatch.setattr("sys.argv", ["termpixel", "line", "--hold", "0"])
    assert demo_main.main() == 0
    assert recorded_argv == [["line", "--hold", "0"]]


def test_file_runs_outside_package() -> None:
    entry = Path(__file__).resolve().parents[1] / "apps" / "demo" / "termpixel_app" / "__main__.py"
    namespace = runpy.run_path(str(entry), run_name="termpixel_entry")
    assert namespace["DEFAULT_COMMAND"] == ("square",)
    assert callable(namespace["main"])
