"""Error Hierarchy — typed, categorized exceptions for all People API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; store/provider errors (500-level) are critical
    - to_response() produces the REST envelope {"error": <message>, "code": <CODE>}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PeopleApiError base: FastAPI global handler catches all (ADR: uniform error shape)
    - "not found" is its own class, never a DatabaseError: callers must be able to tell 404 from 500
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
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


class PeopleApiError(Exception):
    """Base exception for all People API errors."""

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

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {"error": self.message, "code": self.code}


# ─── Client Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(PeopleApiError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: object):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class AuthenticationError(PeopleApiError):
    """OAuth2 callback could not be turned into an authenticated user."""
    def __init__(self, message: str):
        super().__init__(
            message, "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, 401,
        )


class LoginRequiredError(PeopleApiError):
    """Protected route reached without a session; the client is sent to login."""
    def __init__(self, login_path: str = "/login"):
        super().__init__(
            "Login required", "LOGIN_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.INFO, 307,
        )
        self.login_path = login_path


# ─── Infrastructure Errors (500-level) ──────────────────────────

class AuthUnavailableError(PeopleApiError):
    """OAuth2 provider is not configured for this process."""
    def __init__(self, reason: str):
        super().__init__(
            f"Login is unavailable: {reason}",
            "AUTH_UNAVAILABLE", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.ERROR, 503,
        )


class ExternalServiceError(PeopleApiError):
    """OAuth2 provider could not be reached."""
    def __init__(self, service: str, message: str):
        super().__init__(
            f"{service} request failed: {message}",
            "EXTERNAL_SERVICE_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, 502,
        )
        self.service = service


class DatabaseError(PeopleApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation


class DatabaseTimeoutError(PeopleApiError):
    """Database call exceeded its deadline."""
    def __init__(self, operation: str, timeout_seconds: float):
        super().__init__(
            f"Database {operation} exceeded {timeout_seconds:g}s",
            "DATABASE_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.CRITICAL, 504,
        )
        self.operation = operation
        self.timeout_seconds = timeout_seconds
