"""Process-wide catalogue of practices and their descriptors."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Type

from constants import PracticeEvaluationResult, PracticeImpact

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PracticeMetadata:
    """Static description of a practice shown alongside its verdict."""

    id: str
    name: str
    impact: PracticeImpact
    suggestion: str
    report_only_once: bool = False
    url: Optional[str] = None


class Practice:
    """Base class for practices.

    Subclasses set ``metadata`` and implement ``is_applicable`` and
    ``evaluate``; both take a ``context.PracticeContext``.
    """

    metadata: PracticeMetadata

    def is_applicable(self, ctx) -> bool:
        raise NotImplementedError

    def evaluate(self, ctx) -> PracticeEvaluationResult:
        raise NotImplementedError


PRACTICE_REGISTRY: Dict[str, Practice] = {}


def register_practice(practice_cls: Type[Practice]) -> Type[Practice]:
    """Instantiate ``practice_cls`` and add it to the registry.

    Usable as a class decorator.

    Raises:
        ValueError: If the class has no metadata or its id is already taken.
    """
    metadata = getattr(practice_cls, "metadata", None)
    if not isinstance(metadata, PracticeMetadata):
        raise ValueError(f"{practice_cls.__name__} does not declare PracticeMetadata")
    if metadata.id in PRACTICE_REGISTRY:
        raise ValueError(f"Practice already registered: {metadata.id}")
    PRACTICE_REGISTRY[metadata.id] = practice_cls()
    logger.debug("Registered practice %s", metadata.id)
    return practice_cls


def get_practice(practice_id: str) -> Optional[Practice]:
    """Look up a registered practice by id."""
    return PRACTICE_REGISTRY.get(practice_id)


def iter_practices() -> Iterator[Practice]:
    """Yield registered practices in registration order."""
    yield from PRACTICE_REGISTRY.values()
