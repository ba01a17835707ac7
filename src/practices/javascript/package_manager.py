"""Work out which JavaScript package manager can audit a project."""

from __future__ import annotations

import logging
from typing import Optional

from common.shell import command_exists
from constants import Constants, PackageManagerType

logger = logging.getLogger(__name__)

# Probed in order; the first lock file found decides.
_LOCKFILE_EVIDENCE = (
    (Constants.PACKAGE_LOCK_FILE, PackageManagerType.NPM),
    (Constants.NPM_SHRINKWRAP_FILE, PackageManagerType.NPM),
    (Constants.YARN_LOCK_FILE, PackageManagerType.YARN),
)


def detect_package_manager(file_inspector) -> Optional[PackageManagerType]:
    """Infer the package manager from lock files under the project root.

    npm evidence wins over yarn evidence when both are present.

    Args:
        file_inspector: Object exposing ``exists(relative_path)``, or None.

    Returns:
        The detected PackageManagerType, or None without any evidence.
    """
    if file_inspector is None:
        return None
    for lockfile, package_manager in _LOCKFILE_EVIDENCE:
        if file_inspector.exists(lockfile):
            logger.debug("Found %s, using %s", lockfile, package_manager.value)
            return package_manager
    return None


def resolve_installed(
    candidate: Optional[PackageManagerType],
) -> Optional[PackageManagerType]:
    """Confirm the candidate is installed, falling back from yarn to npm.

    Returns:
        The package manager to run, or None if none is usable.
    """
    has_npm = command_exists(PackageManagerType.NPM.value)
    has_yarn = command_exists(PackageManagerType.YARN.value)

    if candidate is PackageManagerType.YARN:
        if has_yarn:
            return candidate
        logger.debug("yarn is not installed, falling back to npm")
        candidate = PackageManagerType.NPM

    if candidate is PackageManagerType.NPM and has_npm:
        return candidate

    return None


def resolve_package_manager(file_inspector) -> Optional[PackageManagerType]:
    """Detect the project's package manager and make sure it can be run."""
    return resolve_installed(detect_package_manager(file_inspector))
