"""Clone-by-value capability.

Copies are always made with an explicit depth:

- SHALLOW: a new object whose attributes reference the same values as the
  original (containers such as dicts and lists are shared).
- DEEP: a new object with every reachable value copied recursively.
"""
import copy
from enum import Enum
from typing import TypeVar, Union

T = TypeVar("T", bound="Prototype")


class CloneDepth(str, Enum):
    """Clone depth enumeration."""
    SHALLOW = "shallow"
    DEEP = "deep"

    @classmethod
    def parse(cls, value: Union["CloneDepth", str]) -> "CloneDepth":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise ValueError(
                f"Clone depth must be one of {[d.value for d in cls]}, got '{value}'"
            ) from e


class Prototype:
    """Mixin giving an object an explicit clone-by-value operation."""

    def clone(self: T, depth: Union[CloneDepth, str]) -> T:
        """
        Return a copy of this object.

        Args:
            depth: CloneDepth.SHALLOW or CloneDepth.DEEP; there is no default

        Returns:
            The copy
        """
        depth = CloneDepth.parse(depth)
        if depth is CloneDepth.DEEP:
            return copy.deepcopy(self)
        return copy.copy(self)
