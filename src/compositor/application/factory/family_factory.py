"""Family factory - create mutually consistent parts for one family."""
from typing import Any, Iterable, List, Optional, Union

from compositor.domain.base.exceptions import FamilyConsistencyError
from compositor.domain.part.family import FamilyDescriptor
from compositor.domain.part.part import PartHandle
from compositor.domain.part.roles import PartRole
from compositor.infrastructure.logging.logger import get_logger
from compositor.infrastructure.registry.family_registry import FamilyRegistry, get_family_registry


class FamilyFactory:
    """
    Abstract factory bound to a single family.

    Every part it returns belongs to that family; a constructor that returns
    a part of another family is reported instead of handed to the caller.
    """

    def __init__(self,
                 descriptor: Union[FamilyDescriptor, str],
                 registry: Optional[FamilyRegistry] = None):
        """
        Initialize the factory.

        Args:
            descriptor: Family to produce parts for
            registry: Registry to read from; defaults to the process-wide one

        Raises:
            UnknownFamily: If the family is not registered
        """
        self._descriptor = FamilyDescriptor.of(descriptor)
        self._registry = registry or get_family_registry()
        self._registration = self._registry.get_registration(self._descriptor)
        self._logger = get_logger(__name__)

    @property
    def descriptor(self) -> FamilyDescriptor:
        return self._descriptor

    @property
    def family(self) -> str:
        return self._descriptor.name

    def available_roles(self) -> List[PartRole]:
        """Roles this family can produce."""
        return self._registration.roles

    def create_part(self, role: Union[PartRole, str], **options: Any) -> PartHandle:
        """
        Create a part of the given role.

        Args:
            role: PartRole or role name
            **options: Passed to the family's constructor for the role

        Returns:
            The constructed part

        Raises:
            UnknownRole: If the role is not registered for this family
            FamilyConsistencyError: If the constructor produced another family's part
        """
        constructor = self._registration.get_constructor(role)
        part = constructor(**options)
        part_family = getattr(part, "family", None)
        part_role = getattr(part, "role", None)
        if part_family != self.family:
            raise FamilyConsistencyError(self.family, str(part_family), PartRole.parse(role).value)
        self._logger.debug(
            "Created part",
            family=self.family,
            role=getattr(part_role, "value", part_role),
            part=type(part).__name__,
        )
        return part

    def create_parts(self, roles: Iterable[Union[PartRole, str]]) -> List[PartHandle]:
        """Create one part per role, in order."""
        return [self.create_part(role) for role in roles]

    def __repr__(self) -> str:
        return f"FamilyFactory(family='{self.family}')"
