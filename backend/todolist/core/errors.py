"""Error Hierarchy: typed, categorized exceptions for all ToDo list failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every model-layer failure is a ToDoListError; handlers catch only this base
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ToDoListError base: list handlers catch only this base
    - http_status is the error's natural status; the list handlers apply their
      own per-operation status table instead
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


class ToDoListError(Exception):
    """Base exception for all ToDo list errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidListNameError(ToDoListError):
    """A list name was empty where a non-empty one is required."""
    def __init__(self, field: str):
        super().__init__(
            f"ToDo list name '{field}' must be a non-empty string",
            "INVALID_LIST_NAME", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 400,
        )
        self.field = field


class ToDoListNotFoundError(ToDoListError):
    """No ToDo list is stored under the requested name."""
    def __init__(self, name: str):
        super().__init__(
            f"ToDo list '{name}' not found",
            "TODO_LIST_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, 404,
        )
        self.name = name


class ToDoListConflictError(ToDoListError):
    """Another ToDo list already uses the requested name."""
    def __init__(self, name: str):
        super().__init__(
            f"ToDo list '{name}' already exists",
            "TODO_LIST_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, 409,
        )
        self.name = name


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ToDoListError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation
