"""Practices evaluated by AuditGate.

Importing this package registers every bundled practice.
"""

from practices.registry import (
    PRACTICE_REGISTRY,
    Practice,
    PracticeMetadata,
    get_practice,
    iter_practices,
    register_practice,
)
from practices.javascript import security_vulnerabilities  # noqa: F401

__all__ = [
    "PRACTICE_REGISTRY",
    "Practice",
    "PracticeMetadata",
    "get_practice",
    "iter_practices",
    "register_practice",
]
