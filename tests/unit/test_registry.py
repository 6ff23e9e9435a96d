"""Tests for the example registry."""

import pytest

from solid_principles.domain.core.exceptions import (
    ExampleNotFoundError,
    ExampleRegistrationError,
)
from solid_principles.registry import ExampleRegistry, get_example_registry


class TestExampleRegistry:
    """Test registration and lookup."""

    def test_builtin_examples_are_registered(self, registry):
        assert len(registry.list()) == 10
        assert registry.principles() == ["srp", "ocp", "lsp", "isp", "dip"]

    def test_list_is_in_canonical_order(self, registry):
        keys = [example.key for example in registry.list()]

        assert keys[:4] == [
            ("srp", "original"),
            ("srp", "refactored"),
            ("ocp", "original"),
            ("ocp", "refactored"),
        ]
        assert keys[-1] == ("dip", "refactored")

    def test_list_filtered_by_variant(self, registry):
        examples = registry.list("original")

        assert len(examples) == 5
        assert {example.variant for example in examples} == {"original"}

    def test_list_unknown_variant(self, registry):
        with pytest.raises(ExampleNotFoundError) as exc_info:
            registry.list("draft")

        assert exc_info.value.principle is None
        assert exc_info.value.variant == "draft"
        assert str(exc_info.value) == "Unknown variant: draft"

    def test_list_variant_is_case_insensitive(self, registry):
        assert len(registry.list("ORIGINAL")) == 5

    def test_known_principle_without_registrations(self, empty_registry):
        with pytest.raises(ExampleNotFoundError) as exc_info:
            empty_registry.get("srp", "original")

        assert exc_info.value.principle == "srp"
        assert exc_info.value.variant == "original"
        assert str(exc_info.value) == "No example registered for srp/original"

    def test_lookup_is_case_insensitive(self, registry):
        example = registry.get("OCP", "Refactored")

        assert example.principle == "ocp"
        assert example.variant == "refactored"
        assert registry.is_registered("DIP", "ORIGINAL")

    def test_unknown_principle(self, registry):
        with pytest.raises(ExampleNotFoundError) as exc_info:
            registry.get("xyz", "original")

        assert exc_info.value.principle == "xyz"
        assert exc_info.value.variant is None

    def test_missing_variant(self, empty_registry):
        empty_registry.register("srp", "original", lambda: None)

        with pytest.raises(ExampleNotFoundError) as exc_info:
            empty_registry.get("srp", "refactored")

        assert exc_info.value.variant == "refactored"

    def test_duplicate_registration_rejected(self, registry):
        with pytest.raises(ExampleRegistrationError):
            registry.register("srp", "original", lambda: None)

    @pytest.mark.parametrize("principle,variant", [("solid", "original"), ("srp", "draft")])
    def test_unknown_names_rejected(self, empty_registry, principle, variant):
        with pytest.raises(ExampleRegistrationError):
            empty_registry.register(principle, variant, lambda: None)

    def test_entry_point_must_be_callable(self, empty_registry):
        with pytest.raises(ExampleRegistrationError):
            empty_registry.register("srp", "original", "not callable")

    def test_default_title(self, empty_registry):
        example = empty_registry.register("lsp", "original", lambda: None)

        assert example.title == "LSP original"

    def test_to_dict_excludes_entry_point(self, registry):
        data = registry.get("isp", "original").to_dict()

        assert set(data) == {"principle", "variant", "title", "description"}

    def test_clear_registrations(self, registry):
        registry.clear_registrations()

        assert registry.list() == []
        assert registry.principles() == []


def test_global_registry_is_singleton():
    first = get_example_registry()
    second = get_example_registry()

    assert first is second
    assert first is ExampleRegistry.get_instance()
    assert len(first.list()) == 10
