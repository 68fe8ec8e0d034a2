"""Infrastructure registry patterns."""

from .family_registry import (
    FamilyRegistration,
    FamilyRegistry,
    constructor_capabilities,
    get_family_registry,
)

__all__ = [
    'FamilyRegistration',
    'FamilyRegistry',
    'constructor_capabilities',
    'get_family_registry',
]
