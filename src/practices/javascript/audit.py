"""Run a package manager's audit command and classify its exit status."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from common.shell import CommandExecutionError, exec_command
from constants import Constants, PackageManagerType, PracticeEvaluationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuditInvocation:
    """What was run for one evaluation and how it exited."""

    package_manager: PackageManagerType
    command: str
    cwd: str
    exit_code: int


def audit_command(package_manager: PackageManagerType) -> str:
    """Return the audit command line for ``package_manager``."""
    if package_manager is PackageManagerType.NPM:
        return Constants.NPM_AUDIT_COMMAND
    return Constants.YARN_AUDIT_COMMAND


def run_audit(
    package_manager: PackageManagerType,
    root: str,
    timeout: Optional[float] = None,
) -> Optional[AuditInvocation]:
    """Run the audit command inside ``root``.

    Output is discarded; only the exit status is kept.

    Returns:
        The AuditInvocation, or None when the command could not be run to
        completion (spawn failure, missing root, timeout).
    """
    if timeout is None:
        timeout = Constants.AUDIT_TIMEOUT_SEC
    command = audit_command(package_manager)
    try:
        result = exec_command(command, root, silent=True, timeout=timeout)
    except CommandExecutionError as exc:
        logger.warning("Audit could not be completed: %s", exc)
        return None

    logger.debug("%s exited with %d", command, result.code)
    return AuditInvocation(
        package_manager=package_manager,
        command=command,
        cwd=root,
        exit_code=result.code,
    )


def classify_exit_code(
    package_manager: PackageManagerType, exit_code: int
) -> PracticeEvaluationResult:
    """Map an audit exit status to a verdict.

    npm exits non-zero as soon as a finding reaches the audit level. yarn
    sets severity bits in its exit status, so anything above the threshold
    carries at least a high-severity finding.
    """
    if package_manager is PackageManagerType.NPM and exit_code > 0:
        return PracticeEvaluationResult.NOT_PRACTICING
    if exit_code > Constants.YARN_AUDIT_FAIL_THRESHOLD:
        return PracticeEvaluationResult.NOT_PRACTICING
    return PracticeEvaluationResult.PRACTICING
