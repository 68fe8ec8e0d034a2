"""Tests for exposing foreign objects through the part contract."""

import pytest

from compositor.domain.base.exceptions import InvalidOperation, UnsupportedOperation
from compositor.domain.part import PartHandle, PartRole
from compositor.families.text_formatter import TextFormatter
from compositor.infrastructure.adapters import CapabilityAdapter, adapter_constructor
from compositor.infrastructure.registry import constructor_capabilities


class LegacyPrinter:
    """Third-party style object with its own method names."""

    def __init__(self, text="hello"):
        self.text = text
        self.calls = 0

    def print_legacy(self):
        self.calls += 1
        return f"printed {self.text}"

    status = "idle"


class TestCapabilityAdapter:

    def test_apply_translates_to_adaptee_method(self):
        printer = LegacyPrinter()
        adapter = CapabilityAdapter(printer, "dark", PartRole.TEXT, {"apply": "print_legacy"})

        assert adapter.apply() == "printed hello"
        assert adapter.invoke("apply") == "printed hello"
        assert printer.calls == 2

    def test_capabilities_follow_method_map(self):
        adapter = CapabilityAdapter(
            TextFormatter("dark", "a b c"), "dark", "text",
            {"apply": "format_text", "count_words": "word_count"},
        )
        assert adapter.capabilities == frozenset({"apply", "count_words"})
        assert adapter.role is PartRole.TEXT
        assert adapter.invoke("count_words") == 3
        assert not adapter.supports("draw")
        assert isinstance(adapter, PartHandle)

    def test_unmapped_operation(self):
        adapter = CapabilityAdapter(LegacyPrinter(), "dark", "text", {"apply": "print_legacy"})
        with pytest.raises(UnsupportedOperation):
            adapter.invoke("draw")

    def test_apply_must_be_mapped(self):
        with pytest.raises(InvalidOperation, match="apply"):
            CapabilityAdapter(LegacyPrinter(), "dark", "text", {"render": "print_legacy"})

    def test_missing_or_non_callable_adaptee_method(self):
        with pytest.raises(InvalidOperation, match="no method 'shout'"):
            CapabilityAdapter(LegacyPrinter(), "dark", "text", {"apply": "shout"})
        with pytest.raises(InvalidOperation):
            CapabilityAdapter(LegacyPrinter(), "dark", "text", {"apply": "status"})

    def test_clone_copies_adaptee_on_deep(self):
        adapter = CapabilityAdapter(LegacyPrinter(), "dark", "text", {"apply": "print_legacy"})
        shallow = adapter.clone("shallow")
        deep = adapter.clone("deep")
        assert shallow.adaptee is adapter.adaptee
        assert deep.adaptee is not adapter.adaptee
        assert deep.apply() == "printed hello"


class TestAdapterConstructor:

    def test_constructor_builds_adapters_with_options(self):
        construct = adapter_constructor(
            LegacyPrinter, family="light", role=PartRole.TEXT, method_map={"apply": "print_legacy"},
        )
        part = construct(label="greeting", text="hi")
        assert part.family == "light"
        assert part.label == "greeting"
        assert part.apply() == "printed hi"

    def test_constructor_advertises_capabilities(self):
        construct = adapter_constructor(
            LegacyPrinter, family="light", role="text", method_map={"apply": "print_legacy"},
        )
        assert constructor_capabilities(construct) == frozenset({"apply"})
