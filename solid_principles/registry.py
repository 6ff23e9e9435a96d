"""Example Registry - maps (principle, variant) pairs to their entry points.

New examples are added by registering them; nothing that consumes the
registry needs to change.
"""

import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from solid_principles.domain.core.exceptions import (
    ExampleNotFoundError,
    ExampleRegistrationError,
)
from solid_principles.helpers.logger import get_logger
from solid_principles.principles import PRINCIPLES, VARIANTS


@dataclass(frozen=True)
class Example:
    """Registration record for one runnable example."""
    principle: str
    variant: str
    title: str
    description: str
    entry_point: Callable[[], None]

    @property
    def key(self) -> Tuple[str, str]:
        return (self.principle, self.variant)

    def to_dict(self) -> Dict[str, str]:
        return {
            "principle": self.principle,
            "variant": self.variant,
            "title": self.title,
            "description": self.description,
        }


def _sort_key(example: Example) -> Tuple[int, int]:
    return (PRINCIPLES.index(example.principle), VARIANTS.index(example.variant))


class ExampleRegistry:
    """
    Registry of principle examples.

    Thread-safe singleton, following the provider registry pattern.
    """

    _instance: Optional['ExampleRegistry'] = None
    _lock = threading.RLock()

    def __init__(self):
        self._registrations: Dict[Tuple[str, str], Example] = {}
        self._registration_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> 'ExampleRegistry':
        """Get singleton instance of the example registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = cls()
                    register_builtin_examples(instance)
                    cls._instance = instance
        return cls._instance

    def register(self,
                 principle: str,
                 variant: str,
                 entry_point: Callable[[], None],
                 title: str = "",
                 description: str = "") -> Example:
        """
        Register an example entry point.

        Raises:
            ExampleRegistrationError: If the principle or variant is unknown,
                or the pair is already registered
        """
        principle = principle.lower()
        variant = variant.lower()
        if principle not in PRINCIPLES:
            raise ExampleRegistrationError(f"Unknown principle '{principle}'")
        if variant not in VARIANTS:
            raise ExampleRegistrationError(f"Unknown variant '{variant}'")
        if not callable(entry_point):
            raise ExampleRegistrationError(f"Entry point for {principle}/{variant} is not callable")

        with self._registration_lock:
            if (principle, variant) in self._registrations:
                raise ExampleRegistrationError(
                    f"Example '{principle}/{variant}' is already registered"
                )
            example = Example(
                principle=principle,
                variant=variant,
                title=title or f"{principle.upper()} {variant}",
                description=description,
                entry_point=entry_point,
            )
            self._registrations[example.key] = example
            self._logger.debug("Registered example", principle=principle, variant=variant)
            return example

    def get(self, principle: str, variant: str) -> Example:
        """Get a registered example; lookups are case-insensitive."""
        principle = principle.lower()
        variant = variant.lower()
        if principle not in PRINCIPLES:
            raise ExampleNotFoundError(principle)
        example = self._registrations.get((principle, variant))
        if example is None:
            raise ExampleNotFoundError(principle, variant)
        return example

    def is_registered(self, principle: str, variant: str) -> bool:
        return (principle.lower(), variant.lower()) in self._registrations

    def list(self, variant: Optional[str] = None) -> List[Example]:
        """All examples in canonical order, optionally restricted to one variant."""
        examples = list(self._registrations.values())
        if variant is not None:
            variant = variant.lower()
            if variant not in VARIANTS:
                raise ExampleNotFoundError(None, variant)
            examples = [e for e in examples if e.variant == variant]
        return sorted(examples, key=_sort_key)

    def principles(self) -> List[str]:
        """Principles with at least one registered example, in canonical order."""
        registered = {principle for principle, _ in self._registrations}
        return [p for p in PRINCIPLES if p in registered]

    def clear_registrations(self) -> None:
        """Clear all registrations. Used primarily for testing."""
        with self._registration_lock:
            self._registrations.clear()


def register_builtin_examples(registry: ExampleRegistry) -> None:
    """Register the ten bundled principle examples."""
    from solid_principles.principles.dip import original as dip_original
    from solid_principles.principles.dip import refactored as dip_refactored
    from solid_principles.principles.isp import original as isp_original
    from solid_principles.principles.isp import refactored as isp_refactored
    from solid_principles.principles.lsp import original as lsp_original
    from solid_principles.principles.lsp import refactored as lsp_refactored
    from solid_principles.principles.ocp import original as ocp_original
    from solid_principles.principles.ocp import refactored as ocp_refactored
    from solid_principles.principles.srp import original as srp_original
    from solid_principles.principles.srp import refactored as srp_refactored

    builtin = [
        ("srp", "original", srp_original.main, "Single Responsibility",
         "One module both persists the user and sends the email."),
        ("srp", "refactored", srp_refactored.main, "Single Responsibility",
         "UserRepository and EmailService each own one responsibility."),
        ("ocp", "original", ocp_original.main, "Open/Closed",
         "Discount is a fixed rule inside a function."),
        ("ocp", "refactored", ocp_refactored.main, "Open/Closed",
         "Discounts are swappable DiscountStrategy implementations."),
        ("lsp", "original", lsp_original.main, "Liskov Substitution",
         "Dog and Cat are interchangeable Animals."),
        ("lsp", "refactored", lsp_refactored.main, "Liskov Substitution",
         "Duck is added with no change to the consumer."),
        ("isp", "original", isp_original.main, "Interface Segregation",
         "A broad Worker interface forces Robot to provide eat()."),
        ("isp", "refactored", isp_refactored.main, "Interface Segregation",
         "Workable and Eatable are implemented selectively."),
        ("dip", "original", dip_original.main, "Dependency Inversion",
         "UserService is bound to the concrete MySQLRepository."),
        ("dip", "refactored", dip_refactored.main, "Dependency Inversion",
         "UserService depends on the Repository abstraction."),
    ]
    for principle, variant, entry_point, title, description in builtin:
        registry.register(principle, variant, entry_point, title=title, description=description)


def get_example_registry() -> ExampleRegistry:
    """Get the global example registry instance."""
    return ExampleRegistry.get_instance()
