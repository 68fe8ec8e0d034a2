"""Family Registry - process-wide registry of part families.

Each family maps every role it supports to a part constructor. The registry
is written during initialization and frozen afterwards; from then on it is
only read, so lookups take no lock.
"""

import threading
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Union

from compositor.domain.base.exceptions import (
    FamilyRegistrationError,
    RegistryFrozen,
    UnknownFamily,
    UnknownRole,
)
from compositor.domain.part.family import FamilyDescriptor
from compositor.domain.part.roles import PartRole
from compositor.infrastructure.logging.logger import get_logger

PartConstructor = Callable[..., Any]

DEFAULT_CAPABILITIES: FrozenSet[str] = frozenset({"apply"})


def constructor_capabilities(constructor: PartConstructor) -> FrozenSet[str]:
    """Capability set a constructor advertises for the parts it builds."""
    capabilities = getattr(constructor, "capabilities", None)
    if not isinstance(capabilities, (frozenset, set, tuple, list)):
        return DEFAULT_CAPABILITIES
    return frozenset(capabilities)


class FamilyRegistration:
    """Container for family registration information."""

    def __init__(self, descriptor: FamilyDescriptor, constructors: Mapping[Any, PartConstructor]):
        """
        Initialize family registration.

        Args:
            descriptor: Family the constructors belong to
            constructors: Role (PartRole or role name) to part constructor
        """
        normalized: Dict[PartRole, PartConstructor] = {}
        for role, constructor in constructors.items():
            if not callable(constructor):
                raise FamilyRegistrationError(
                    f"Constructor for role '{role}' of family '{descriptor.name}' is not callable"
                )
            try:
                normalized[PartRole.parse(role)] = constructor
            except UnknownRole as e:
                raise FamilyRegistrationError(
                    f"Family '{descriptor.name}' registers unknown role '{role}'"
                ) from e
        if not normalized:
            raise FamilyRegistrationError(f"Family '{descriptor.name}' registers no roles")

        self.descriptor = descriptor
        self.constructors: Mapping[PartRole, PartConstructor] = MappingProxyType(normalized)

    @property
    def family(self) -> str:
        return self.descriptor.name

    @property
    def roles(self) -> List[PartRole]:
        return list(self.constructors)

    def get_constructor(self, role: Union[PartRole, str]) -> PartConstructor:
        """
        Raises:
            UnknownRole: If the role is unknown or not provided by this family
        """
        try:
            parsed = PartRole.parse(role)
        except UnknownRole as e:
            raise UnknownRole(role, self.family, [r.value for r in self.roles]) from e
        constructor = self.constructors.get(parsed)
        if constructor is None:
            raise UnknownRole(parsed.value, self.family, [r.value for r in self.roles])
        return constructor

    def capabilities(self) -> Dict[str, List[str]]:
        """Role name to sorted capability names."""
        return {
            role.value: sorted(constructor_capabilities(constructor))
            for role, constructor in self.constructors.items()
        }

    def same_as(self, constructors: Mapping[Any, PartConstructor]) -> bool:
        try:
            other = {PartRole.parse(role): c for role, c in constructors.items()}
        except UnknownRole:
            return False
        return other == dict(self.constructors)

    def __repr__(self) -> str:
        return f"FamilyRegistration(family='{self.family}', roles={[r.value for r in self.roles]})"


class FamilyRegistry:
    """
    Registry for part families.

    Thread-safe singleton implementation. Registration is serialized by a
    lock; once frozen the registry rejects further registrations and is read
    without locking.
    """

    _instance: Optional["FamilyRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize family registry."""
        self._registrations: Dict[str, FamilyRegistration] = {}
        self._frozen = False
        self._initialized = False
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "FamilyRegistry":
        """Get singleton instance of family registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def initialized(self) -> bool:
        return self._initialized

    def register_family(self,
                        descriptor: Union[FamilyDescriptor, str],
                        constructors: Mapping[Any, PartConstructor]) -> FamilyRegistration:
        """
        Register a family with its role constructors.

        Registering an identical mapping again is a no-op, so repeated
        startup is safe.

        Args:
            descriptor: Family descriptor or family name
            constructors: Role to part constructor

        Returns:
            The (existing or new) registration

        Raises:
            RegistryFrozen: If the registry has been frozen
            FamilyRegistrationError: If the family exists with a different mapping
        """
        try:
            descriptor = FamilyDescriptor.of(descriptor)
        except UnknownFamily as e:
            raise FamilyRegistrationError(f"Cannot register family: {e.message}") from e
        with self._registration_lock:
            existing = self._registrations.get(descriptor.name)
            if existing is not None:
                if existing.same_as(constructors):
                    self._logger.debug("Family already registered", family=descriptor.name)
                    return existing
                raise FamilyRegistrationError(
                    f"Family '{descriptor.name}' is already registered with different constructors"
                )
            if self._frozen:
                raise RegistryFrozen(
                    f"Cannot register family '{descriptor.name}': registry is frozen"
                )

            registration = FamilyRegistration(descriptor, constructors)
            self._registrations[descriptor.name] = registration
            self._logger.info(
                "Registered family",
                family=descriptor.name,
                roles=[role.value for role in registration.roles],
            )
            return registration

    def freeze(self) -> None:
        """Make the registry read-only."""
        with self._registration_lock:
            if not self._frozen:
                self._frozen = True
                self._logger.info("Family registry frozen", families=self.get_registered_families())

    def initialize(self,
                   families: Mapping[str, Mapping[Any, PartConstructor]],
                   freeze: bool = True) -> None:
        """
        One-time initialization: register families, then freeze.

        A second call with the same families is a no-op.
        """
        with self._registration_lock:
            if self._initialized:
                for name, constructors in families.items():
                    self.register_family(name, constructors)
                return
            for name, constructors in families.items():
                self.register_family(name, constructors)
            self._initialized = True
            if freeze:
                self.freeze()

    def is_family_registered(self, descriptor: Union[FamilyDescriptor, str]) -> bool:
        """Check if a family is registered."""
        try:
            return FamilyDescriptor.of(descriptor).name in self._registrations
        except UnknownFamily:
            return False

    def get_registered_families(self) -> List[str]:
        """Get list of all registered family names."""
        return list(self._registrations.keys())

    def get_registration(self, descriptor: Union[FamilyDescriptor, str]) -> FamilyRegistration:
        """
        Get the registration of a family.

        Raises:
            UnknownFamily: If the family is not registered
        """
        name = FamilyDescriptor.of(descriptor).name
        registration = self._registrations.get(name)
        if registration is None:
            raise UnknownFamily(name, self.get_registered_families())
        return registration

    def supported_operations(self) -> FrozenSet[str]:
        """Union of the capabilities of every registered part constructor."""
        operations = set()
        for registration in self._registrations.values():
            for constructor in registration.constructors.values():
                operations |= constructor_capabilities(constructor)
        return frozenset(operations)

    def clear_registrations(self) -> None:
        """Clear all family registrations and unfreeze. Used primarily for testing."""
        with self._registration_lock:
            self._registrations.clear()
            self._frozen = False
            self._initialized = False
            self._logger.info("Cleared all family registrations")


def get_family_registry() -> FamilyRegistry:
    """Get the global family registry instance."""
    return FamilyRegistry.get_instance()
