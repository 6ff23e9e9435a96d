"""Example runner - executes, captures and compares registered examples."""

import io
import time
from contextlib import contextmanager, redirect_stdout
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from solid_principles.helpers.logger import get_logger
from solid_principles.principles import VARIANTS
from solid_principles.registry import Example, ExampleRegistry, get_example_registry

logger = get_logger(__name__)


@contextmanager
def timed_operation(operation_name: str, **context: Any) -> Iterator[None]:
    """Context manager to time and log an operation."""
    start_time = time.time()
    try:
        yield
    finally:
        elapsed_time = time.time() - start_time
        logger.debug(f"{operation_name} completed", elapsed=f"{elapsed_time:.4f}s", **context)


@dataclass(frozen=True)
class ComparisonResult:
    """Outputs of the original and refactored variants of one principle."""
    principle: str
    original_output: List[str]
    refactored_output: List[str]
    added_lines: List[str] = field(default_factory=list)
    removed_lines: List[str] = field(default_factory=list)

    @property
    def identical(self) -> bool:
        return self.original_output == self.refactored_output

    def to_dict(self) -> Dict[str, Any]:
        return {
            "principle": self.principle,
            "identical": self.identical,
            "original_output": list(self.original_output),
            "refactored_output": list(self.refactored_output),
            "added_lines": list(self.added_lines),
            "removed_lines": list(self.removed_lines),
        }


class ExampleRunner:
    """Runs registered examples."""

    def __init__(self, registry: Optional[ExampleRegistry] = None):
        self._registry = registry or get_example_registry()

    @property
    def registry(self) -> ExampleRegistry:
        return self._registry

    def run(self, principle: str, variant: str = "refactored") -> Example:
        """Run one example; its output goes to the current stdout."""
        example = self._registry.get(principle, variant)
        self._execute(example)
        return example

    def capture(self, principle: str, variant: str = "refactored") -> List[str]:
        """Run one example and return the lines it printed."""
        example = self._registry.get(principle, variant)
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            self._execute(example)
        return buffer.getvalue().splitlines()

    def compare(self, principle: str) -> ComparisonResult:
        """Capture both variants of a principle and diff their output."""
        original, refactored = (self.capture(principle, variant) for variant in VARIANTS)
        return ComparisonResult(
            principle=principle.lower(),
            original_output=original,
            refactored_output=refactored,
            added_lines=[line for line in refactored if line not in original],
            removed_lines=[line for line in original if line not in refactored],
        )

    def run_all(self, variant: Optional[str] = None) -> List[Example]:
        """Run every registered example in canonical order."""
        examples = self._registry.list(variant)
        for example in examples:
            print(f"== {example.principle}/{example.variant} ==")
            self._execute(example)
        return examples

    @staticmethod
    def _execute(example: Example) -> None:
        with timed_operation("Example run", principle=example.principle, variant=example.variant):
            example.entry_point()
