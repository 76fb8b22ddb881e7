"""Error Hierarchy — typed, categorized exceptions for every tiffin failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors carry http_status 400, including "not found" (kept as 400, not 404)
    - Infrastructure errors are 500-level and never carry field details
    - to_response() produces the error envelope body

Design Decisions:
    - Single hierarchy with TiffinError base: services convert any TiffinError
      into an error envelope in one place (services/envelope_guard.py)
    - FieldIssue is a frozen dataclass: the field list is shared, never mutated
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
    CONFLICT = "conflict"
    ACCESS = "access"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass(frozen=True)
class FieldIssue:
    """One violated constraint on one public (camelCase) field."""
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    operation: str | None = None


class TiffinError(Exception):
    """Base exception for all tiffin errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        fields: tuple[FieldIssue, ...] = (),
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.fields = tuple(fields)

    @property
    def is_client_error(self) -> bool:
        return self.http_status < 500

    def to_response(self) -> dict:
        """Convert to the standardized error envelope body."""
        return {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "fields": [issue.to_dict() for issue in self.fields],
            },
        }


# ─── Client Errors (400) ────────────────────────────────────────

class InputValidationError(TiffinError):
    """Request body, query or identifier failed schema validation."""
    def __init__(
        self,
        message: str,
        fields: tuple[FieldIssue, ...] | list[FieldIssue],
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400, tuple(fields),
        )


class InvalidIdentifierError(InputValidationError):
    """Identifier is not a well-formed store key."""
    def __init__(self, field_name: str = "id", context: ErrorContext | None = None):
        super().__init__(
            "Invalid ID",
            (FieldIssue(field_name, "Must be a valid identifier"),),
            context,
        )


class DuplicateValueError(TiffinError):
    """A value that must be unique is already taken."""
    def __init__(
        self,
        message: str,
        field_name: str,
        field_message: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "DUPLICATE_VALUE", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
            (FieldIssue(field_name, field_message),),
        )


class DuplicatePhoneError(DuplicateValueError):
    """Another customer already has this phone number."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Customer already exists", "phone", "Phone number must be unique",
            context,
        )


class ResourceNotFoundError(TiffinError):
    """Referenced record does not exist. Reported as a 400-class error."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidAccessKeyError(TiffinError):
    """Access key unknown or expired. The two cases are indistinguishable."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Access key is not valid. Please request for a new key.",
            "ACCESS_KEY_INVALID", ErrorCategory.ACCESS,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Infrastructure Errors (500) ────────────────────────────────

class DatabaseError(TiffinError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
