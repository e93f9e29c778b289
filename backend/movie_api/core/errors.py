"""Error Hierarchy: typed, categorized exceptions for Movies API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Not-found errors serialize to the fixed body {"error": "Movie not found"}
    - Infrastructure errors surface as a generic 500 with no internal details

Design Decisions:
    - Single hierarchy with MovieApiError base: one global handler catches all
    - ErrorContext as dataclass: observability data kept out of the response body
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
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
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    movie_id: int | None = None


class MovieApiError(Exception):
    """Base exception for all Movies API errors."""

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
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class MovieNotFoundError(MovieApiError):
    """No row matches the requested movie id."""

    MESSAGE = "Movie not found"

    def __init__(self, movie_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.movie_id = movie_id
        super().__init__(
            self.MESSAGE, "MOVIE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.movie_id = movie_id

    def to_response(self) -> dict:
        return {"error": self.message}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(MovieApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation

    def to_response(self) -> dict:
        # Driver messages stay in the logs
        return {
            "error": {
                "code": self.code,
                "message": "An unexpected error occurred",
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }
