"""Error Hierarchy — typed, categorized exceptions for all marketid failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Identifier validation errors are recoverable (400-level) and subclass ValueError
    - ContractViolationError is never produced from user input
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with MarketIdError base: FastAPI global handler catches all (ADR: uniform error shape)
    - IdentifierError is also a ValueError: pydantic validators turn it into ValidationError
      without a translation layer
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
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    identifier_type: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class MarketIdError(Exception):
    """Base exception for all marketid errors."""

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
                    "identifier_type": self.context.identifier_type,
                },
            }
        }


# ─── Identifier Errors (400-level) ──────────────────────────────

class IdentifierError(MarketIdError, ValueError):
    """Identifier text or bytes failed validation."""

    def __init__(self, message: str, code: str, type_name: str):
        super().__init__(
            message, code, ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            ErrorContext(identifier_type=type_name), 400,
        )
        self.type_name = type_name


class StringTooShortError(IdentifierError):
    def __init__(self, type_name: str, min_length: int):
        super().__init__(
            f"{type_name} is shorter than {min_length} characters.",
            "STRING_TOO_SHORT", type_name,
        )
        self.min_length = min_length


class StringTooLongError(IdentifierError):
    def __init__(self, type_name: str, max_length: int):
        super().__init__(
            f"{type_name} is longer than {max_length} characters.",
            "STRING_TOO_LONG", type_name,
        )
        self.max_length = max_length


class InvalidCharacterError(IdentifierError):
    """A character outside the identifier alphabet."""
    def __init__(self, type_name: str, char: str):
        super().__init__(
            f"Invalid character {char!r} in {type_name}.",
            "INVALID_CHARACTER", type_name,
        )
        self.char = char


class InvalidHyphenPositionError(IdentifierError):
    def __init__(self, type_name: str):
        super().__init__(
            f"{type_name} cannot start or end with a hyphen.",
            "INVALID_HYPHEN_POSITION", type_name,
        )


class BytesTooShortError(IdentifierError):
    def __init__(self, type_name: str, min_bytes: int):
        super().__init__(
            f"Bytes is shorter than {min_bytes} bytes.",
            "BYTES_TOO_SHORT", type_name,
        )
        self.min_bytes = min_bytes


class BytesTooLongError(IdentifierError):
    def __init__(self, type_name: str, max_bytes: int):
        super().__init__(
            f"Bytes is longer than {max_bytes} bytes.",
            "BYTES_TOO_LONG", type_name,
        )
        self.max_bytes = max_bytes


class InvalidCodeError(IdentifierError):
    """Packed data holds a 6-bit code with no character (only reachable from raw bytes)."""
    def __init__(self, type_name: str, code: int):
        super().__init__(
            f"Packed code {code} has no character in {type_name}.",
            "INVALID_CODE", type_name,
        )
        self.code_value = code


class PayloadTypeError(IdentifierError):
    """Serialization mode received a payload of the wrong type."""
    def __init__(self, type_name: str, expected: str, received: str):
        super().__init__(
            f"{type_name} expected {expected} payload, got {received}.",
            "PAYLOAD_TYPE_MISMATCH", type_name,
        )
        self.expected = expected
        self.received = received


# ─── Store Errors ───────────────────────────────────────────────

class ResourceNotFoundError(MarketIdError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class KeyTypeMismatchError(MarketIdError):
    """Key passed to a store does not match the store's key class."""
    def __init__(self, expected: str, received: str, context: ErrorContext | None = None):
        super().__init__(
            f"Store keyed by {expected} received a {received} key",
            "KEY_TYPE_MISMATCH", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Internal / Infrastructure Errors (500-level) ───────────────

class ContractViolationError(MarketIdError):
    """Caller broke a documented precondition (e.g. trusted bytes out of range)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONTRACT_VIOLATION", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class StorageBoundExceededError(MarketIdError):
    """Encoded key is larger than the bound declared to the store."""
    def __init__(self, type_name: str, size: int, max_size: int):
        super().__init__(
            f"{type_name} encodes to {size} bytes, bound is {max_size}",
            "STORAGE_BOUND_EXCEEDED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ErrorContext(identifier_type=type_name), 500,
        )
        self.size = size
        self.max_size = max_size


class DatabaseError(MarketIdError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
