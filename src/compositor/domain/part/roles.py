"""Part roles - the closed set of part kinds a family can produce."""
from enum import Enum
from typing import Any

from compositor.domain.base.exceptions import UnknownRole


class PartRole(str, Enum):
    """Role enumeration."""
    BUTTON = "button"
    TEXT = "text"
    DRAWABLE = "drawable"

    @classmethod
    def parse(cls, value: Any) -> "PartRole":
        """
        Convert a role name or member into a PartRole.

        Args:
            value: PartRole member or its (case-insensitive) string value

        Returns:
            Matching PartRole

        Raises:
            UnknownRole: If value names no role
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownRole(value, available=[role.value for role in cls])
