# solid_principles/domain/models.py
from __future__ import annotations
from dataclasses import dataclass

from solid_principles.domain.core.exceptions import ValidationError


@dataclass(frozen=True)
class User:
    """A registered user."""
    name: str
    email: str

    def __post_init__(self):
        if not self.name:
            raise ValidationError("User name is required")
        if not self.email:
            raise ValidationError("User email is required", {"name": self.name})


@dataclass(frozen=True)
class Product:
    """A product with a list price."""
    name: str
    price: float

    def __post_init__(self):
        if not self.name:
            raise ValidationError("Product name is required")
        if self.price < 0:
            raise ValidationError(
                f"Invalid price for {self.name}: {self.price}",
                {"price": self.price},
            )
