"""Part domain - roles, families and the part capability contract."""

from .family import FamilyDescriptor
from .part import Part, PartHandle
from .prototype import CloneDepth, Prototype
from .roles import PartRole

__all__ = [
    "FamilyDescriptor",
    "Part",
    "PartHandle",
    "PartRole",
    "CloneDepth",
    "Prototype",
]
