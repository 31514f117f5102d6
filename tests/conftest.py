"""Pytest configuration and shared fixtures."""

import tempfile

import pytest

from core.clipboard import Action, ClipboardContext


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Working directory that relative item paths resolve against."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def staging(tmp_path):
    path = tmp_path / "Clipboard"
    path.mkdir()
    return path


@pytest.fixture
def temp_root(tmp_path, monkeypatch):
    """Redirect the platform temp directory so the real clipboard is untouched."""
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


@pytest.fixture
def make_ctx(staging):
    def _make(action, *items):
        return ClipboardContext(action=action, staging=staging, items=list(items))

    return _make
