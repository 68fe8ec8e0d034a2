"""Base domain layer - shared kernel for the compositor domain."""

from .exceptions import (
    BlueprintValidationError,
    BuilderSealed,
    CompositorError,
    ConfigurationError,
    CycleDetected,
    FamilyConsistencyError,
    FamilyRegistrationError,
    IncompleteConfiguration,
    InvalidOperation,
    InvariantViolation,
    RegistryFrozen,
    TreeSealed,
    UnknownFamily,
    UnknownRole,
    UnsupportedOperation,
)
from .value_objects import ValueObject

__all__ = [
    # Value Objects
    "ValueObject",
    # Exceptions
    "CompositorError",
    "InvalidOperation",
    "CycleDetected",
    "UnknownRole",
    "UnknownFamily",
    "FamilyConsistencyError",
    "BuilderSealed",
    "TreeSealed",
    "IncompleteConfiguration",
    "UnsupportedOperation",
    "InvariantViolation",
    "BlueprintValidationError",
    "ConfigurationError",
    "FamilyRegistrationError",
    "RegistryFrozen",
]
