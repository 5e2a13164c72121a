"""Domain exceptions."""
from typing import List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class DemoNotFoundError(DomainException):
    """Raised when a requested principle has no registered demo."""

    def __init__(self, principle: str, available: Optional[List[str]] = None):
        self.principle = principle
        self.available = available or []
        message = f"No demo registered for principle '{principle}'"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)
