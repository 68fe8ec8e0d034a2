"""Part contract - what the engine needs from a constructed part."""
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, FrozenSet, Optional, Protocol, Union, runtime_checkable

from compositor.domain.base.exceptions import UnsupportedOperation
from compositor.domain.part.prototype import CloneDepth, Prototype
from compositor.domain.part.roles import PartRole


@runtime_checkable
class PartHandle(Protocol):
    """Opaque handle to a constructed part, polymorphic over its capability set."""

    family: str
    role: PartRole
    capabilities: FrozenSet[str]

    def supports(self, operation: str) -> bool: ...

    def invoke(self, operation: str) -> Any: ...

    def apply(self) -> Any: ...

    def clone(self, depth: Union[CloneDepth, str]) -> "PartHandle": ...


class Part(Prototype, ABC):
    """
    Base class for parts produced by a family.

    Subclasses declare their role and capability set as class attributes;
    every capability name must resolve to a method of the subclass.
    """

    role: ClassVar[PartRole]
    capabilities: ClassVar[FrozenSet[str]] = frozenset({"apply"})

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for name in cls.capabilities:
            if not callable(getattr(cls, name, None)):
                raise TypeError(
                    f"{cls.__name__} declares capability '{name}' without a method for it"
                )

    def __init__(self, family: str, label: Optional[str] = None):
        self.family = family
        self.label = label

    def supports(self, operation: str) -> bool:
        """Check whether the part exposes the given capability."""
        return operation in self.capabilities

    def invoke(self, operation: str) -> Any:
        """
        Run one capability of the part.

        Raises:
            UnsupportedOperation: If the part does not expose the capability
        """
        if not self.supports(operation):
            raise UnsupportedOperation(
                operation, f"{self.family} {self.role.value} part does not expose it"
            )
        return getattr(self, operation)()

    @abstractmethod
    def apply(self) -> Any:
        """Perform the part's primary behaviour."""

    def describe(self) -> Dict[str, Any]:
        """Summary of the part for reports and CLI output."""
        return {
            "family": self.family,
            "role": self.role.value,
            "label": self.label,
            "capabilities": sorted(self.capabilities),
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(family='{self.family}', label={self.label!r})"
