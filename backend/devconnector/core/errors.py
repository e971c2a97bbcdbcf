"""Error Hierarchy — typed, categorized exceptions for all DevConnector failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), http_status (int)
    - Validation errors carry one FieldError per violated field
    - to_response() produces the wire envelope: {"errors": [...]} or {"msg": ...}
    - Infrastructure errors never put internal detail on the wire

Design Decisions:
    - Single hierarchy with DevConnectorError base: FastAPI global handler catches all
    - Core raises, api/error_handlers.py renders; routes never build error bodies
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass(frozen=True)
class FieldError:
    """One violated field in a validation failure."""
    msg: str
    field: str | None = None

    def to_dict(self) -> dict:
        if self.field is None:
            return {"msg": self.msg}
        return {"msg": self.msg, "field": self.field}


class DevConnectorError(Exception):
    """Base exception for all DevConnector errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self) -> dict:
        """Single-cause envelope."""
        return {"msg": self.message}


# ─── Authentication (401) ───────────────────────────────────────

class MissingCredentialError(DevConnectorError):
    """No credential on the request."""
    def __init__(self):
        super().__init__(
            "No token, authorization denied", "MISSING_CREDENTIAL",
            ErrorCategory.AUTHENTICATION, 401,
        )


class InvalidCredentialError(DevConnectorError):
    """Credential failed signature, shape or expiry checks."""
    def __init__(self, reason: str = "invalid"):
        super().__init__(
            "Token is not valid", "INVALID_CREDENTIAL",
            ErrorCategory.AUTHENTICATION, 401,
        )
        self.reason = reason


class UnauthorizedError(DevConnectorError):
    """Authenticated identity does not own the target resource."""
    def __init__(self, message: str = "User not authorized"):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHORIZATION, 401,
        )


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationFailedError(DevConnectorError):
    """One or more fields failed validation."""
    def __init__(self, errors: list[FieldError]):
        super().__init__(
            "; ".join(e.msg for e in errors) or "Invalid request data",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400,
        )
        self.errors = list(errors)

    def to_response(self) -> dict:
        return {"errors": [e.to_dict() for e in self.errors]}


class ProfileNotFoundError(DevConnectorError):
    """No Profile for the requested owner."""
    def __init__(self, message: str = "Profile not found"):
        super().__init__(
            message, "PROFILE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 400,
        )


class EntryNotFoundError(DevConnectorError):
    """Nested entry id not present in its parent list."""
    def __init__(self, collection: str, entry_id: str):
        label = collection.capitalize()
        super().__init__(
            f"{label} not found", "ENTRY_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, 400,
        )
        self.collection = collection
        self.entry_id = entry_id


class ResourceNotFoundError(DevConnectorError):
    """Requested top-level resource does not exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} not found", "RESOURCE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateActionError(DevConnectorError):
    """Request repeats or undoes an action in an invalid order (like/unlike)."""
    def __init__(self, message: str):
        super().__init__(
            message, "DUPLICATE_ACTION", ErrorCategory.VALIDATION, 400,
        )


class ConcurrencyError(DevConnectorError):
    """Aggregate was modified by another writer since it was read."""
    def __init__(self, resource_type: str):
        super().__init__(
            f"{resource_type} was modified concurrently, reload and retry",
            "CONCURRENCY_CONFLICT", ErrorCategory.CONFLICT, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreUnavailableError(DevConnectorError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, http_status: int = 500):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORE_UNAVAILABLE", ErrorCategory.DATABASE, http_status,
        )
        self.operation = operation

    def to_response(self) -> dict:
        return {"msg": "Server error"}


@dataclass
class ErrorList:
    """Accumulates FieldErrors and raises them together."""
    errors: list[FieldError] = field(default_factory=list)

    def add(self, msg: str, field_name: str | None = None) -> None:
        self.errors.append(FieldError(msg=msg, field=field_name))

    def raise_if_any(self) -> None:
        if self.errors:
            raise ValidationFailedError(self.errors)
