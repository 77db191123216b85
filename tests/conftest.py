from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def solution_dir(tmp_path: Path) -> Path:
    for name in ("App.sln", "App.csproj", "Lib.csproj", "README.md", "notes.sln.txt"):
        (tmp_path / name).write_text("", encoding="utf-8")
    (tmp_path / "Folder.sln").mkdir()
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "Deep.csproj").write_text("", encoding="utf-8")
    return tmp_path
