"""Error Hierarchy: typed, categorized exceptions for all B2B Gate failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - NotFoundError on a category is tolerated by set expansion; everywhere else it propagates
    - ConfigurationError is never converted into an "all active" or "none active" default
    - to_response() produces the REST envelope used by the API and the CLI
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
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    RESOURCE_NOT_FOUND = "resource_not_found"
    COLLABORATOR = "collaborator"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    product_id: int | None = None
    category_id: int | None = None
    config_key: str | None = None
    debug_info: dict[str, Any] | None = None


class B2BGateError(Exception):
    """Base exception for all B2B Gate errors."""

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
                    "product_id": self.context.product_id,
                    "category_id": self.context.category_id,
                    "config_key": self.context.config_key,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class NotFoundError(B2BGateError):
    """Category, product, customer or group id absent in the backing store."""
    def __init__(
        self, resource_type: str, resource_id: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConfigurationError(B2BGateError):
    """Store configuration value cannot be parsed (e.g. non-numeric id token)."""
    def __init__(self, key: str, message: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.config_key = key
        super().__init__(
            f"Invalid configuration '{key}': {message}",
            "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.ERROR, ctx, 422,
        )
        self.key = key


# ─── Infrastructure Errors (500-level) ──────────────────────────

class CollaboratorUnavailableError(B2BGateError):
    """Underlying repository, session or snapshot cannot be reached."""
    def __init__(
        self, collaborator: str, reason: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{collaborator} unavailable: {reason}",
            "COLLABORATOR_UNAVAILABLE", ErrorCategory.COLLABORATOR,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.collaborator = collaborator
