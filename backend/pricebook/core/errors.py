"""Error Hierarchy — typed, categorized exceptions for all Pricebook failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PricebookError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    data_point_id: int | None = None
    provider_id: int | None = None


class PricebookError(Exception):
    """Base exception for all Pricebook errors."""

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
                    "data_point_id": self.context.data_point_id,
                    "provider_id": self.context.provider_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class DataPointValidationError(PricebookError):
    """Data point failed field validation. Carries every message at once."""
    def __init__(self, errors: list[str], context: ErrorContext | None = None):
        super().__init__(
            "; ".join(errors), "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.errors = errors

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = list(self.errors)
        return response


class InvalidProviderReferenceError(PricebookError):
    """Provider reference could not be parsed to an integer id."""
    def __init__(self, raw_value: object, context: ErrorContext | None = None):
        super().__init__(
            f"Provider reference {raw_value!r} is not a valid provider id",
            "INVALID_PROVIDER_REFERENCE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.raw_value = raw_value


class ResourceNotFoundError(PricebookError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateProviderError(PricebookError):
    """A provider with the same display name already exists."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Provider '{name}' already exists",
            "DUPLICATE_PROVIDER", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.name = name


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PricebookError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class ApiRequestError(PricebookError):
    """HTTP call from the page controller to the API failed.

    Client-side only: status_code is the server's answer (None when the request
    never got one); http_status keeps the base default since this error is never
    rendered as a response.
    """
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "API_REQUEST_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context,
        )
        self.status_code = status_code
