"""Practice: no known high-severity vulnerabilities in dependencies."""

from __future__ import annotations

import logging
from typing import Optional

from constants import (
    PackageManagerType,
    PracticeEvaluationResult,
    PracticeImpact,
    ProgrammingLanguage,
)
from practices.javascript.audit import classify_exit_code, run_audit
from practices.javascript.package_manager import resolve_package_manager
from practices.registry import Practice, PracticeMetadata, register_practice

logger = logging.getLogger(__name__)

_UNKNOWN_PACKAGE_MANAGER_MESSAGE = (
    "Cannot establish package-manager type, missing package-lock.json and "
    "yarn.lock or npm command not installed."
)


def evaluate_audit(
    package_manager: Optional[PackageManagerType],
    root: Optional[str],
) -> PracticeEvaluationResult:
    """Audit ``root`` with ``package_manager`` and return the verdict."""
    if package_manager is None:
        logger.debug(_UNKNOWN_PACKAGE_MANAGER_MESSAGE)
        return PracticeEvaluationResult.UNKNOWN

    invocation = run_audit(package_manager, root)
    if invocation is None:
        return PracticeEvaluationResult.UNKNOWN
    return classify_exit_code(invocation.package_manager, invocation.exit_code)


@register_practice
class SecurityVulnerabilitiesPractice(Practice):
    """Delegates to ``npm audit`` / ``yarn audit`` for the project root."""

    metadata = PracticeMetadata(
        id="JavaScript.SecurityVulnerabilities",
        name="Security vulnerabilities detected",
        impact=PracticeImpact.HIGH,
        suggestion=(
            "Some high-severity security vulnerabilities were detected. "
            "Use npm/yarn audit or Snyk to fix them."
        ),
        report_only_once=True,
        url="https://snyk.io/",
    )

    def is_applicable(self, ctx) -> bool:
        return ctx.project_component.language in (
            ProgrammingLanguage.JAVASCRIPT,
            ProgrammingLanguage.TYPESCRIPT,
        )

    def evaluate(self, ctx) -> PracticeEvaluationResult:
        file_inspector = ctx.file_inspector
        package_manager = resolve_package_manager(file_inspector)
        root = file_inspector.base_path if file_inspector is not None else None
        return evaluate_audit(package_manager, root)
