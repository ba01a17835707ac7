"""Read-only project context handed to practices."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from constants import ProgrammingLanguage


class FileInspector:
    """Checks for files relative to a project root."""

    def __init__(self, base_path: str):
        self.base_path = os.path.abspath(base_path)

    def _resolve(self, relative_path: str) -> str:
        path = relative_path
        while path.startswith("./"):
            path = path[2:]
        return os.path.join(self.base_path, path)

    def exists(self, relative_path: str) -> bool:
        """Return True if ``relative_path`` exists under the base path."""
        return os.path.exists(self._resolve(relative_path))


@dataclass(frozen=True)
class ProjectComponent:
    """A single component of a project, described by its language and path."""

    language: ProgrammingLanguage
    path: str


@dataclass(frozen=True)
class PracticeContext:
    """Everything a practice may look at while it is evaluated."""

    project_component: ProjectComponent
    file_inspector: Optional[FileInspector] = None

    @classmethod
    def for_directory(cls, path: str, language: ProgrammingLanguage) -> "PracticeContext":
        """Build a context for a project rooted at ``path``."""
        return cls(
            project_component=ProjectComponent(language=language, path=path),
            file_inspector=FileInspector(path),
        )
