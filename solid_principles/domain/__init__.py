"""Domain layer - records and exceptions used by the principle examples."""

from .core.exceptions import (
    ConfigurationError,
    DomainException,
    ExampleNotFoundError,
    ExampleRegistrationError,
    UnsupportedCapabilityError,
    ValidationError,
)
from .models import Product, User

__all__ = [
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "ExampleNotFoundError",
    "ExampleRegistrationError",
    "UnsupportedCapabilityError",
    "Product",
    "User",
]
