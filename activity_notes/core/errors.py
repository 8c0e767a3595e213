"""Error Hierarchy — typed, categorized exceptions for all activity-notes failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every failure aborts the single operation that raised it; nothing is retried
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ActivityNotesError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    fields: list[str] | None = None
    debug_info: dict[str, Any] | None = None


class ActivityNotesError(Exception):
    """Base exception for all activity-notes errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "user_id": self.context.user_id,
                    "fields": self.context.fields,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class UnauthenticatedError(ActivityNotesError):
    """No signed-in user could be resolved for the request."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Not authenticated",
            "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class NoteValidationError(ActivityNotesError):
    """One or more required note fields are empty."""
    def __init__(self, fields: list[str], context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.fields = list(fields)
        super().__init__(
            f"{', '.join(fields)} {'is' if len(fields) == 1 else 'are'} required",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.fields = list(fields)


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(ActivityNotesError):
    """Database operation failed; the enclosing transaction was rolled back."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
