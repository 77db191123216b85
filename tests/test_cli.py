from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from devenv_predictor.cli import app
from devenv_predictor.predictor import PREDICTOR_IDENTIFIER

runner = CliRunner()


def test_suggest_prints_one_line_per_suggestion(solution_dir: Path) -> None:
    result = runner.invoke(app, ["suggest", "devenv ", "--cwd", str(solution_dir)])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "devenv App.sln"
    assert sorted(lines[1:]) == ["devenv App.csproj", "devenv Lib.csproj"]


def test_suggest_honours_cursor(solution_dir: Path) -> None:
    result = runner.invoke(app, ["suggest", "devenv Lib.csproj /Build", "--cwd", str(solution_dir), "--cursor", "9"])

    assert result.exit_code == 0
    assert result.stdout.strip() == ""


def test_suggest_for_other_command_prints_nothing(solution_dir: Path) -> None:
    result = runner.invoke(app, ["suggest", "dotnet ", "--cwd", str(solution_dir)])

    assert result.exit_code == 0
    assert result.stdout.strip() == ""


def test_info_shows_identity() -> None:
    result = runner.invoke(app, ["info"])

    assert result.exit_code == 0
    assert f"id: {PREDICTOR_IDENTIFIER}" in result.stdout
    assert "name: Devenv" in result.stdout


def test_hooks_lists_predictor() -> None:
    result = runner.invoke(app, ["hooks"])

    assert result.exit_code == 0
    assert f"get_suggestion: {PREDICTOR_IDENTIFIER}" in result.stdout
