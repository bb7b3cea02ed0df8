"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from dotsync.core import context
from dotsync.core.models import Roots


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch):
    """Keep tests independent of the host platform and of each other."""
    monkeypatch.delenv("DOTSYNC_PLATFORM", raising=False)
    monkeypatch.delenv("DOTSYNC_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DOTSYNC_LOG_FILE", raising=False)
    monkeypatch.delenv("DOTSYNC_LOG_FILE_LEVEL", raising=False)
    context.reset_roots()
    yield
    context.reset_roots()


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """An empty repository checkout."""
    root = tmp_path / "repo"
    root.mkdir()
    return root


@pytest.fixture
def home_root(tmp_path: Path) -> Path:
    """An empty home directory."""
    root = tmp_path / "home"
    root.mkdir()
    return root


@pytest.fixture
def roots(repo_root: Path, home_root: Path) -> Roots:
    return Roots(repo_root=repo_root, home_root=home_root)


@pytest.fixture
def snapshot():
    """Return a function mapping relative path → file bytes (None for directories)."""

    def _snapshot(root: Path) -> dict[str, bytes | None]:
        result: dict[str, bytes | None] = {}
        for path in sorted(root.rglob("*")):
            rel = path.relative_to(root).as_posix()
            result[rel] = None if path.is_dir() else path.read_bytes()
        return result

    return _snapshot
