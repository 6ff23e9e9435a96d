# solid_principles/domain/core/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class ExampleNotFoundError(DomainException):
    """Raised when a principle/variant pair is not registered."""
    def __init__(self, principle: Optional[str], variant: Optional[str] = None):
        if principle is None:
            message = f"Unknown variant: {variant}"
        elif variant is None:
            message = f"Unknown principle: {principle}"
        else:
            message = f"No example registered for {principle}/{variant}"
        super().__init__(message)
        self.principle = principle
        self.variant = variant


class ExampleRegistrationError(DomainException):
    """Raised when an example cannot be registered."""
    pass


class UnsupportedCapabilityError(DomainException):
    """Raised when a type is asked for a capability it cannot provide."""
    def __init__(self, type_name: str, capability: str):
        super().__init__(f"{type_name} does not support {capability}")
        self.type_name = type_name
        self.capability = capability
