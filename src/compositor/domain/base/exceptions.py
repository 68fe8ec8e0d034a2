"""Domain exceptions - every error the engine reports to its callers."""
from typing import Any, List, Optional, Sequence


class CompositorError(Exception):
    """Base exception for all compositor errors."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidOperation(CompositorError):
    """Raised when an operation is not valid for the node or object it targets."""
    pass


class CycleDetected(CompositorError):
    """Raised when attaching a node would make the ownership graph cyclic."""

    def __init__(self, parent_label: str, child_label: str):
        super().__init__(
            f"Attaching {child_label} under {parent_label} would create a cycle"
        )
        self.parent_label = parent_label
        self.child_label = child_label


class UnknownRole(CompositorError):
    """Raised when a factory is asked for a role it cannot produce."""

    def __init__(self, role: Any, family: Optional[str] = None, available: Sequence[str] = ()):
        where = f" for family '{family}'" if family else ""
        message = f"Role '{role}' is not registered{where}"
        if available:
            message += f". Available roles: {', '.join(available)}"
        super().__init__(message)
        self.role = role
        self.family = family
        self.available = list(available)


class UnknownFamily(CompositorError):
    """Raised when a family descriptor has no registration."""

    def __init__(self, family: str, available: Sequence[str] = (), reason: Optional[str] = None):
        if reason:
            message = f"Family '{family}' is not valid: {reason}"
        else:
            message = (
                f"Family '{family}' is not registered. "
                f"Available families: {', '.join(available) or 'none'}"
            )
        super().__init__(message)
        self.family = family
        self.available = list(available)


class FamilyConsistencyError(CompositorError):
    """Raised when a constructed part does not belong to the requested family."""

    def __init__(self, expected: str, actual: str, role: str):
        super().__init__(
            f"Constructor for role '{role}' of family '{expected}' produced a '{actual}' part"
        )
        self.expected = expected
        self.actual = actual
        self.role = role


class BuilderSealed(CompositorError):
    """Raised when a sealed builder is mutated or finalized again."""
    pass


class TreeSealed(BuilderSealed):
    """Raised when a sealed component tree is mutated."""
    pass


class IncompleteConfiguration(CompositorError):
    """Raised when a builder is finalized without all required fields."""

    def __init__(self, missing_fields: List[str]):
        super().__init__(
            f"Missing required fields: {', '.join(missing_fields)}",
            details={"missing_fields": list(missing_fields)},
        )
        self.missing_fields = list(missing_fields)


class UnsupportedOperation(CompositorError):
    """Raised when an operation cannot be dispatched over a tree."""

    def __init__(self, operation: str, reason: Optional[str] = None, details: Any = None):
        message = f"Operation '{operation}' is not supported"
        if reason:
            message += f": {reason}"
        super().__init__(message, details)
        self.operation = operation


class InvariantViolation(CompositorError):
    """Raised when a component tree breaks one of its structural invariants."""
    pass


class BlueprintValidationError(CompositorError):
    """Raised when a blueprint cannot be turned into a tree."""
    pass


class ConfigurationError(CompositorError):
    """Raised when there's an issue with configuration or registration."""
    pass


class FamilyRegistrationError(ConfigurationError):
    """Raised when a family registration conflicts with an existing one."""
    pass


class RegistryFrozen(ConfigurationError):
    """Raised when the family registry is written after initialization."""
    pass
