"""Family descriptor value object."""
import re
from typing import Union

from pydantic import ValidationError, field_validator

from compositor.domain.base.exceptions import UnknownFamily
from compositor.domain.base.value_objects import ValueObject

_FAMILY_NAME = re.compile(r"^[a-z0-9_-]+$")


class FamilyDescriptor(ValueObject):
    """Symbolic tag naming a family of mutually consistent parts (e.g. a theme)."""

    name: str

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Normalize and validate the family tag."""
        if not isinstance(v, str):
            raise ValueError("Family name must be a string")
        v = v.strip().lower()
        if not _FAMILY_NAME.match(v):
            raise ValueError(
                f"Invalid family name '{v}': use lower-case letters, digits, '-' or '_'"
            )
        return v

    @classmethod
    def of(cls, value: Union["FamilyDescriptor", str]) -> "FamilyDescriptor":
        """
        Accept either a descriptor or a bare family name.

        Raises:
            UnknownFamily: If the name is not a valid family tag
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(name=value)
        except ValidationError as e:
            raise UnknownFamily(
                str(value), reason="use lower-case letters, digits, '-' or '_'"
            ) from e

    def __str__(self) -> str:
        return self.name
