"""Shared pytest fixtures for AuditGate tests."""

import os

import pytest

from constants import Constants


@pytest.fixture(autouse=True)
def restore_audit_constants():
    """Undo Constants overrides applied by the CLI/config code."""
    saved = (Constants.AUDIT_TIMEOUT_SEC, Constants.YARN_AUDIT_FAIL_THRESHOLD)
    yield
    Constants.AUDIT_TIMEOUT_SEC, Constants.YARN_AUDIT_FAIL_THRESHOLD = saved


@pytest.fixture
def make_project(tmp_path):
    """Create a project directory containing the given lock files."""

    def _make(*lockfiles):
        for name in lockfiles:
            (tmp_path / name).write_text("{}\n", encoding="utf-8")
        return str(tmp_path)

    return _make


@pytest.fixture
def installed(monkeypatch):
    """Pretend exactly the named executables are on PATH."""

    def _installed(*names):
        available = set(names)
        monkeypatch.setattr(
            "practices.javascript.package_manager.command_exists",
            lambda name: name in available,
        )

    return _installed


@pytest.fixture
def cwd_guard():
    """Assert the process working directory is left untouched."""
    before = os.getcwd()
    yield before
    assert os.getcwd() == before
