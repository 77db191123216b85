"""Command line front end around a local predictor host."""

from __future__ import annotations

from pathlib import Path

import typer

from devenv_predictor.config import get_settings
from devenv_predictor.host import PredictorHost
from devenv_predictor.predictor import DevenvPredictor, on_import

app = typer.Typer(name="devenv-predictor", help="Suggest solution and project files for devenv", add_completion=False)


def _load_host(cwd: Path | None) -> tuple[PredictorHost, DevenvPredictor]:
    get_settings()
    host = PredictorHost()
    predictor = on_import(host)
    host.publish_location(str((cwd or Path.cwd()).resolve()))
    return host, predictor


@app.command("suggest")
def suggest_line(
    line: str = typer.Argument(..., help="Partially typed command line"),
    cwd: Path | None = typer.Option(None, "--cwd", "-C", help="Current location of the shell"),  # noqa: B008
    cursor: int | None = typer.Option(None, "--cursor", help="Cursor offset, defaults to end of line"),
) -> None:
    """Print one full-line suggestion per line."""

    host, _ = _load_host(cwd)
    for result in host.request_suggestions(line, cursor):
        for suggestion in result.suggestions:
            typer.echo(suggestion)


@app.command("info")
def show_info() -> None:
    """Show the predictor identity."""

    _, predictor = _load_host(None)
    typer.echo(f"id: {predictor.id}")
    typer.echo(f"name: {predictor.name}")
    typer.echo(f"description: {predictor.description}")


@app.command("hooks")
def list_hooks() -> None:
    """Show hook implementation mapping."""

    host, _ = _load_host(None)
    report = host.hook_report()
    if not report:
        typer.echo("(no hook implementations)")
        return
    for hook_name, plugin_names in report.items():
        typer.echo(f"{hook_name}: {', '.join(plugin_names)}")
