"""devenv-predictor CLI entry point."""

from __future__ import annotations

from devenv_predictor.cli import app

if __name__ == "__main__":
    app()
