"""
Exceptions for the neuromatch service.

Validation errors carry the offending field so the transport layer can
report it back without re-parsing the message.
"""
from typing import Any, Dict, Iterable, Optional


class NeuromatchError(Exception):
    """Base exception for all neuromatch errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class PreferenceValidationError(NeuromatchError):
    """Raised when a user preference cannot be accepted."""

    def __init__(self, message: str, field: Optional[str] = None, **details: Any):
        if field:
            details["field"] = field
        super().__init__(message, details)
        self.field = field


class MissingParameterError(PreferenceValidationError):
    """A required preference field was absent or empty."""

    def __init__(self, fields: Iterable[str]):
        missing = list(fields)
        super().__init__(
            f"Missing required parameters: {', '.join(missing)}",
            field=missing[0] if len(missing) == 1 else None,
            missing=missing,
        )
        self.missing = missing


class MalformedValueError(PreferenceValidationError):
    """A preference field was present but could not be parsed or is out of range."""

    def __init__(self, field: str, message: str, value: Any = None):
        details = {} if value is None else {"value": value}
        super().__init__(f"Invalid value for '{field}': {message}", field=field, **details)


class NotFoundError(NeuromatchError):
    """Raised when a requested resource does not exist."""


class CatalogLoadError(NeuromatchError):
    """Raised when the course catalog file cannot be turned into courses."""

    def __init__(self, message: str, source: Optional[str] = None, record: Optional[int] = None):
        details: Dict[str, Any] = {}
        if source:
            details["source"] = source
        if record is not None:
            details["record"] = record
        super().__init__(message, details)
