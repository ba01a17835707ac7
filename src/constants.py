"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    EXIT_WARNINGS = 3


class PackageManagerType(Enum):
    """JavaScript package managers that can audit a project.

    Args:
        Enum (string): Executable name of the package manager.
    """

    NPM = "npm"
    YARN = "yarn"


class PracticeEvaluationResult(Enum):
    """Outcome of evaluating a single practice against a project component."""

    PRACTICING = "practicing"
    NOT_PRACTICING = "notPracticing"
    UNKNOWN = "unknown"


class PracticeImpact(Enum):
    """How much a violated practice matters."""

    HIGH = "high"
    MEDIUM = "medium"
    SMALL = "small"
    HINT = "hint"
    OFF = "off"


class ProgrammingLanguage(Enum):
    """Source languages a project component can declare."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    PYTHON = "python"
    JAVA = "java"
    GO = "go"
    UNKNOWN = "unknown"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    SUPPORTED_LANGUAGES = [language.value for language in ProgrammingLanguage]
    PACKAGE_LOCK_FILE = "package-lock.json"
    NPM_SHRINKWRAP_FILE = "./npm-shrinkwrap.json"
    YARN_LOCK_FILE = "./yarn.lock"
    NPM_AUDIT_COMMAND = "npm audit --audit-level=high"
    YARN_AUDIT_COMMAND = "yarn audit --summary"
    # yarn 1.x ORs severities into the exit code: 1 info, 2 low, 4 moderate,
    # 8 high, 16 critical.
    YARN_AUDIT_FAIL_THRESHOLD = 7
    AUDIT_TIMEOUT_SEC = 300
    RESULT_PREFIX = "[PRACTICE]"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "AUDITGATE_LOG_LEVEL"
