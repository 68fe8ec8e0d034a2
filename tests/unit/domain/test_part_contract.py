"""Tests for roles, family descriptors and the part base class."""

import pytest
from pydantic import ValidationError

from compositor.domain.base.exceptions import UnknownFamily, UnknownRole, UnsupportedOperation
from compositor.domain.part import FamilyDescriptor, Part, PartHandle, PartRole


class Knob(Part):
    role = PartRole.BUTTON
    capabilities = frozenset({"apply", "turn"})

    def __init__(self):
        super().__init__("test", label="knob")
        self.turns = 0

    def apply(self):
        return "applied"

    def turn(self):
        self.turns += 1
        return self.turns


class TestPartRole:

    def test_parse_is_case_insensitive(self):
        assert PartRole.parse("Button") is PartRole.BUTTON
        assert PartRole.parse(" TEXT ") is PartRole.TEXT
        assert PartRole.parse(PartRole.DRAWABLE) is PartRole.DRAWABLE

    def test_unknown_role(self):
        with pytest.raises(UnknownRole) as exc:
            PartRole.parse("slider")
        assert "button" in exc.value.available

    def test_non_string_role(self):
        with pytest.raises(UnknownRole):
            PartRole.parse(42)


class TestFamilyDescriptor:

    def test_name_is_normalized(self):
        assert FamilyDescriptor(name=" Dark ").name == "dark"
        assert FamilyDescriptor.of("LIGHT") == FamilyDescriptor(name="light")

    def test_of_passes_descriptor_through(self):
        descriptor = FamilyDescriptor(name="dark")
        assert FamilyDescriptor.of(descriptor) is descriptor

    def test_invalid_name(self):
        with pytest.raises(ValidationError):
            FamilyDescriptor(name="dark theme!")
        with pytest.raises(ValidationError):
            FamilyDescriptor(name="")

    def test_of_rejects_invalid_name(self):
        with pytest.raises(UnknownFamily, match="not valid"):
            FamilyDescriptor.of("Dark Theme")

    def test_descriptor_is_immutable(self):
        descriptor = FamilyDescriptor(name="dark")
        with pytest.raises(ValidationError):
            descriptor.name = "light"

    def test_str(self):
        assert str(FamilyDescriptor(name="dark")) == "dark"


class TestPart:

    def test_invoke_dispatches_to_capability(self):
        knob = Knob()
        assert knob.supports("turn")
        assert knob.invoke("turn") == 1
        assert knob.invoke("apply") == "applied"

    def test_invoke_unsupported(self):
        with pytest.raises(UnsupportedOperation, match="draw"):
            Knob().invoke("draw")

    def test_capability_without_method_rejected(self):
        with pytest.raises(TypeError, match="spin"):
            class Broken(Part):
                role = PartRole.BUTTON
                capabilities = frozenset({"apply", "spin"})

                def apply(self):
                    return None

    def test_satisfies_part_handle_protocol(self):
        assert isinstance(Knob(), PartHandle)

    def test_describe(self):
        assert Knob().describe() == {
            "family": "test",
            "role": "button",
            "label": "knob",
            "capabilities": ["apply", "turn"],
        }
