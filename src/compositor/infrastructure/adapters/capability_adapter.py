"""Capability adapter - expose a foreign object through the part contract."""
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional

from compositor.domain.base.exceptions import InvalidOperation, UnsupportedOperation
from compositor.domain.part.prototype import Prototype
from compositor.domain.part.roles import PartRole


class CapabilityAdapter(Prototype):
    """
    Wraps an object that knows nothing about parts.

    ``method_map`` translates capability names to methods of the adaptee,
    e.g. ``{"apply": "format_text"}``. The map must provide ``apply``.
    """

    def __init__(self,
                 adaptee: Any,
                 family: str,
                 role: PartRole,
                 method_map: Mapping[str, str],
                 label: Optional[str] = None):
        if "apply" not in method_map:
            raise InvalidOperation("An adapter must map the 'apply' capability")
        for capability, method_name in method_map.items():
            if not callable(getattr(adaptee, method_name, None)):
                raise InvalidOperation(
                    f"{type(adaptee).__name__} has no method '{method_name}' "
                    f"to back capability '{capability}'"
                )
        self.adaptee = adaptee
        self.family = family
        self.role = PartRole.parse(role)
        self.label = label
        self.method_map: Dict[str, str] = dict(method_map)

    @property
    def capabilities(self) -> FrozenSet[str]:
        return frozenset(self.method_map)

    def supports(self, operation: str) -> bool:
        return operation in self.method_map

    def invoke(self, operation: str) -> Any:
        if not self.supports(operation):
            raise UnsupportedOperation(
                operation, f"adapted {type(self.adaptee).__name__} does not expose it"
            )
        return getattr(self.adaptee, self.method_map[operation])()

    def apply(self) -> Any:
        return self.invoke("apply")

    def describe(self) -> Dict[str, Any]:
        return {
            "family": self.family,
            "role": self.role.value,
            "label": self.label,
            "capabilities": sorted(self.capabilities),
            "adaptee": type(self.adaptee).__name__,
        }

    def __repr__(self) -> str:
        return (
            f"CapabilityAdapter({type(self.adaptee).__name__}, family='{self.family}', "
            f"role='{self.role.value}')"
        )


def adapter_constructor(adaptee_factory: Callable[..., Any],
                        *,
                        family: str,
                        role: PartRole,
                        method_map: Mapping[str, str]) -> Callable[..., CapabilityAdapter]:
    """
    Build a registry-ready part constructor around an adaptee factory.

    The returned callable accepts ``label`` plus any options for the adaptee
    factory, and advertises its capability set before any part is built.
    """
    method_map = dict(method_map)

    def construct(label: Optional[str] = None, **options: Any) -> CapabilityAdapter:
        return CapabilityAdapter(
            adaptee_factory(**options),
            family=family,
            role=role,
            method_map=method_map,
            label=label,
        )

    construct.capabilities = frozenset(method_map)
    construct.__name__ = f"adapted_{getattr(adaptee_factory, '__name__', 'part')}"
    return construct
