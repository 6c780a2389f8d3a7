"""Shared kernel: exceptions used across every idiom."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    MissingFieldError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "DomainException",
    "MissingFieldError",
    "ValidationError",
]
