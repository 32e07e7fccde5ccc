"""Test configuration and fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

_SETTINGS_ENV = ("LOG_LEVEL", "ROSALIND_DATA_ENCODING", "ROSALIND_MAX_NUMERIC_PARAM")


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from an empty directory with no runner settings in the environment."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Undo `configure_logging` so handlers never outlive a captured stream."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def data_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write a data file and return its path."""

    def write(content: str, name: str = "rosalind.txt") -> Path:
        path = tmp_path / "data" / name
        path.parent.mkdir(exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return write
