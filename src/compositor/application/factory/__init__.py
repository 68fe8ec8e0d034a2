"""Part factories."""

from .family_factory import FamilyFactory

__all__ = ["FamilyFactory"]
