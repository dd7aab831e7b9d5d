"""Error Hierarchy - typed, categorized exceptions for all DevConnect failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope used by every error response
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DevConnectError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Not-found and conflict answer 400, not 404/409: existing clients key on 400 for both
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None


@dataclass(frozen=True)
class FieldError:
    """A single failed input rule."""
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class DevConnectError(Exception):
    """Base exception for all DevConnect errors."""

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


# --- Client Errors (400-level) ------------------------------------

class InputValidationError(DevConnectError):
    """Request body failed one or more input rules."""
    def __init__(self, errors: list[FieldError], context: ErrorContext | None = None):
        super().__init__(
            "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.errors = errors

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [e.to_dict() for e in self.errors]
        return response


class ProfileNotFoundError(DevConnectError):
    """No profile matches the requested owner."""
    def __init__(self, message: str = "Profile not found", context: ErrorContext | None = None):
        super().__init__(
            message, "PROFILE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 400,
        )


class UserAlreadyExistsError(DevConnectError):
    """Registration attempted with an email that is already taken."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "User already exists", "USER_ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 400,
        )


class AuthenticationError(DevConnectError):
    """Bearer token missing or rejected."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class MissingTokenError(AuthenticationError):
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("No token, authorization denied", "AUTH_REQUIRED", context)


class InvalidTokenError(AuthenticationError):
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Token is not valid", "INVALID_TOKEN", context)


# --- Infrastructure Errors (500-level) ----------------------------

class DatabaseError(DevConnectError):
    """Database operation failed. Client sees only a generic message."""
    def __init__(self, detail: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            "Server error", "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.detail = detail
        self.operation = operation
