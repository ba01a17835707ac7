"""End-to-end tests for the JavaScript security vulnerabilities practice."""

import logging
import os
import sys
from unittest.mock import patch

import pytest

from common.shell import CommandExecutionError, CommandResult
from constants import (
    PackageManagerType,
    PracticeEvaluationResult,
    PracticeImpact,
    ProgrammingLanguage,
)
from context import PracticeContext, ProjectComponent
from practices import get_practice
from practices.javascript.security_vulnerabilities import (
    SecurityVulnerabilitiesPractice,
    evaluate_audit,
)

PRACTICE_ID = "JavaScript.SecurityVulnerabilities"
EXEC = "practices.javascript.audit.exec_command"


def _ctx(root, language=ProgrammingLanguage.JAVASCRIPT):
    return PracticeContext.for_directory(root, language)


@pytest.fixture
def practice():
    return get_practice(PRACTICE_ID)


class TestRegistration:
    def test_registered(self, practice):
        assert isinstance(practice, SecurityVulnerabilitiesPractice)

    def test_metadata(self, practice):
        meta = practice.metadata
        assert meta.name == "Security vulnerabilities detected"
        assert meta.impact is PracticeImpact.HIGH
        assert meta.report_only_once is True
        assert meta.url == "https://snyk.io/"
        assert "npm/yarn audit or Snyk" in meta.suggestion


class TestIsApplicable:
    @pytest.mark.parametrize(
        "language,expected",
        [
            (ProgrammingLanguage.JAVASCRIPT, True),
            (ProgrammingLanguage.TYPESCRIPT, True),
            (ProgrammingLanguage.PYTHON, False),
            (ProgrammingLanguage.UNKNOWN, False),
        ],
    )
    def test_language_gate(self, practice, tmp_path, language, expected):
        assert practice.is_applicable(_ctx(str(tmp_path), language)) is expected


class TestEvaluate:
    """Scenarios from the resolve -> run -> classify pipeline."""

    @patch(EXEC)
    def test_no_lockfiles_is_unknown(self, mock_exec, practice, make_project, installed):
        installed("npm", "yarn")
        root = make_project()
        assert practice.evaluate(_ctx(root)) is PracticeEvaluationResult.UNKNOWN
        mock_exec.assert_not_called()

    @patch(EXEC)
    def test_npm_clean_audit(self, mock_exec, practice, make_project, installed, cwd_guard):
        installed("npm")
        mock_exec.return_value = CommandResult(code=0)
        root = make_project("package-lock.json")
        assert practice.evaluate(_ctx(root)) is PracticeEvaluationResult.PRACTICING
        command, cwd = mock_exec.call_args.args
        assert command == "npm audit --audit-level=high"
        assert cwd == os.path.abspath(root)

    @patch(EXEC)
    def test_yarn_high_severity(self, mock_exec, practice, make_project, installed):
        installed("npm", "yarn")
        mock_exec.return_value = CommandResult(code=8)
        root = make_project("yarn.lock")
        assert practice.evaluate(_ctx(root)) is PracticeEvaluationResult.NOT_PRACTICING
        assert mock_exec.call_args.args[0] == "yarn audit --summary"

    @patch(EXEC)
    def test_yarn_project_without_yarn_uses_npm(self, mock_exec, practice, make_project, installed):
        installed("npm")
        mock_exec.return_value = CommandResult(code=1)
        root = make_project("yarn.lock")
        assert practice.evaluate(_ctx(root)) is PracticeEvaluationResult.NOT_PRACTICING
        assert mock_exec.call_args.args[0] == "npm audit --audit-level=high"

    @patch(EXEC)
    def test_no_tools_installed(self, mock_exec, practice, make_project, installed):
        installed()
        root = make_project("yarn.lock")
        assert practice.evaluate(_ctx(root)) is PracticeEvaluationResult.UNKNOWN
        mock_exec.assert_not_called()

    @patch(EXEC)
    def test_missing_file_inspector(self, mock_exec, practice, installed):
        installed("npm", "yarn")
        ctx = PracticeContext(
            project_component=ProjectComponent(ProgrammingLanguage.JAVASCRIPT, "."),
        )
        assert practice.evaluate(ctx) is PracticeEvaluationResult.UNKNOWN
        mock_exec.assert_not_called()

    @patch(EXEC)
    def test_spawn_failure_is_unknown(self, mock_exec, practice, make_project, installed, cwd_guard):
        installed("npm")
        mock_exec.side_effect = CommandExecutionError("npm audit --audit-level=high", "spawn failed")
        root = make_project("package-lock.json")
        assert practice.evaluate(_ctx(root)) is PracticeEvaluationResult.UNKNOWN

    @patch(EXEC)
    def test_repeated_evaluation_is_stable(self, mock_exec, practice, make_project, installed):
        installed("npm")
        mock_exec.return_value = CommandResult(code=1)
        root = make_project("package-lock.json")
        verdicts = {practice.evaluate(_ctx(root)) for _ in range(3)}
        assert verdicts == {PracticeEvaluationResult.NOT_PRACTICING}
        assert mock_exec.call_count == 3

    @pytest.mark.skipif(sys.platform == "win32", reason="uses a POSIX shell script")
    def test_real_process_restores_cwd(self, practice, make_project, installed, cwd_guard, tmp_path_factory, monkeypatch):
        bin_dir = tmp_path_factory.mktemp("bin")
        fake_npm = bin_dir / "npm"
        fake_npm.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
        fake_npm.chmod(0o755)
        monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
        installed("npm")
        root = make_project("package-lock.json")
        assert practice.evaluate(_ctx(root)) is PracticeEvaluationResult.PRACTICING

    @pytest.mark.skipif(sys.platform == "win32", reason="uses a POSIX shell script")
    def test_undecodable_audit_output(self, practice, make_project, installed, tmp_path_factory, monkeypatch):
        bin_dir = tmp_path_factory.mktemp("bin")
        fake_npm = bin_dir / "npm"
        fake_npm.write_text("#!/bin/sh\nprintf '\\377\\376 vuln'\nexit 1\n", encoding="utf-8")
        fake_npm.chmod(0o755)
        monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
        installed("npm")
        root = make_project("package-lock.json")
        assert practice.evaluate(_ctx(root)) is PracticeEvaluationResult.NOT_PRACTICING

    @pytest.mark.skipif(sys.platform == "win32", reason="uses a POSIX shell script")
    def test_reported_tool_missing_from_path(self, practice, make_project, installed, tmp_path_factory, monkeypatch):
        monkeypatch.setenv("PATH", str(tmp_path_factory.mktemp("empty")))
        installed("yarn")
        root = make_project("yarn.lock")
        assert practice.evaluate(_ctx(root)) is PracticeEvaluationResult.UNKNOWN

    @pytest.mark.skipif(sys.platform == "win32", reason="uses a POSIX shell script")
    def test_reported_tool_not_executable(self, practice, make_project, installed, tmp_path_factory, monkeypatch):
        bin_dir = tmp_path_factory.mktemp("bin")
        fake_yarn = bin_dir / "yarn"
        fake_yarn.write_text("#!/bin/sh\nexit 16\n", encoding="utf-8")
        fake_yarn.chmod(0o644)
        monkeypatch.setenv("PATH", str(bin_dir))
        installed("yarn")
        root = make_project("yarn.lock")
        assert practice.evaluate(_ctx(root)) is PracticeEvaluationResult.UNKNOWN


class TestEvaluateAudit:
    def test_none_logs_diagnostic(self, caplog):
        caplog.set_level(logging.DEBUG, logger="practices.javascript.security_vulnerabilities")
        with patch(EXEC) as mock_exec:
            assert evaluate_audit(None, "/nowhere") is PracticeEvaluationResult.UNKNOWN
            mock_exec.assert_not_called()
        assert "Cannot establish package-manager type" in caplog.text

    @patch(EXEC, return_value=CommandResult(code=7))
    def test_yarn_threshold(self, _mock_exec, tmp_path):
        assert evaluate_audit(PackageManagerType.YARN, str(tmp_path)) is PracticeEvaluationResult.PRACTICING
