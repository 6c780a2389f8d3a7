# src/composition_idioms/domain/core/exceptions.py
from typing import Any, Optional, List

class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass

class ValidationError(DomainException):
    """Raised when construction input is malformed."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details

class MissingFieldError(ValidationError):
    """Raised when a required field without a default is absent."""
    def __init__(self, type_name: str, field_name: str):
        super().__init__(
            f"{type_name} requires '{field_name}'",
            {"field": field_name}
        )
        self.type_name = type_name
        self.field_name = field_name

class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
