"""Shared fixtures for building throwaway repository trees."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def repo(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Callable[[dict[str, str]], Path]:
    """Return a factory that writes files under a temporary cwd."""
    monkeypatch.chdir(tmp_path)

    def make(files: dict[str, str]) -> Path:
        for name, content in files.items():
            target = tmp_path / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return tmp_path

    return make
