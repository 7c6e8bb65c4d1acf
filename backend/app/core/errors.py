"""Error Hierarchy — typed, categorized exceptions for all Spaces failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - SpaceDeletionError is discriminated by .kind, never by message or instance identity
    - to_response() produces REST envelope
    - A space that is missing or foreign carries the same code on every route
      (SPACE_NOT_FOUND / SPACE_NOT_OWNED), whether reading or deleting
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SpacesError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - One deletion exception carrying a DeletionErrorKind instead of five module-level
      sentinels: callers branch on kind, the taxonomy stays closed
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone

from app.core.domain_types import DeletionErrorKind


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    PERMISSION = "permission"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    space_id: str | None = None
    user_id: str | None = None
    user_message: str | None = None


class SpacesError(Exception):
    """Base exception for all Spaces errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "space_id": self.context.space_id,
                    "user_id": self.context.user_id,
                },
            }
        }


# ─── Deletion Errors ────────────────────────────────────────────

# kind -> (message, category, severity, http_status)
_DELETION_OUTCOMES: dict[DeletionErrorKind, tuple[str, ErrorCategory, ErrorSeverity, int]] = {
    DeletionErrorKind.NOT_FOUND: (
        "cannot fetch the space",
        ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.ERROR, 404,
    ),
    DeletionErrorKind.NOT_OWNED: (
        "only owned spaces can be removed",
        ErrorCategory.PERMISSION, ErrorSeverity.ERROR, 403,
    ),
    DeletionErrorKind.NOT_EMPTY: (
        "only empty spaces can be removed",
        ErrorCategory.BUSINESS_RULE, ErrorSeverity.ERROR, 409,
    ),
    DeletionErrorKind.PROTECTED_DEFAULT: (
        "the default space cannot be removed",
        ErrorCategory.BUSINESS_RULE, ErrorSeverity.ERROR, 409,
    ),
    DeletionErrorKind.REMOVAL_FAILED: (
        "the space could not be removed",
        ErrorCategory.DATABASE, ErrorSeverity.CRITICAL, 503,
    ),
}


class SpaceDeletionError(SpacesError):
    """Space deletion rejected or failed. Inspect .kind to branch."""
    def __init__(
        self,
        kind: DeletionErrorKind,
        cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        message, category, severity, http_status = _DELETION_OUTCOMES[kind]
        super().__init__(
            message, kind.value.upper(), category, severity, context, http_status,
        )
        self.kind = kind
        self.cause = cause


# ─── Domain Errors (400-level) ──────────────────────────────────

class SpaceNotFoundError(SpacesError):
    """Requested space does not exist."""
    def __init__(self, space_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"Space '{space_id}' not found",
            DeletionErrorKind.NOT_FOUND.value.upper(), ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class SpaceAccessDeniedError(SpacesError):
    """Acting user does not own the space."""
    def __init__(self, space_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"Space '{space_id}' is not owned by the acting user",
            DeletionErrorKind.NOT_OWNED.value.upper(), ErrorCategory.PERMISSION,
            ErrorSeverity.ERROR, context, 403,
        )


class UnauthorizedError(SpacesError):
    """Request carries no acting user."""
    def __init__(self, header: str):
        super().__init__(
            f"Missing {header} header",
            "ACTING_USER_MISSING", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.ERROR, None, 401,
        )
        self.header = header


class SpaceConflictError(SpacesError):
    """Space creation would break a per-owner uniqueness rule."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "SPACE_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(SpacesError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
