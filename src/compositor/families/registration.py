"""Built-in family registration - register the bundled families with the family registry."""
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, Mapping, Optional

from compositor.domain.base.exceptions import ConfigurationError
from compositor.families.dark import DARK_PARTS
from compositor.families.light import LIGHT_PARTS

if TYPE_CHECKING:
    from compositor.infrastructure.registry.family_registry import FamilyRegistry

BUILTIN_FAMILIES: Dict[str, Mapping[Any, Callable[..., Any]]] = {
    "dark": DARK_PARTS,
    "light": LIGHT_PARTS,
}


def builtin_families(names: Optional[Iterable[str]] = None) -> Dict[str, Mapping[Any, Callable[..., Any]]]:
    """
    Select built-in family mappings by name.

    Raises:
        ConfigurationError: If a name is not a built-in family
    """
    if names is None:
        return dict(BUILTIN_FAMILIES)
    selected = {}
    for name in names:
        if name not in BUILTIN_FAMILIES:
            raise ConfigurationError(
                f"Unknown built-in family '{name}'. Available: {', '.join(BUILTIN_FAMILIES)}"
            )
        selected[name] = BUILTIN_FAMILIES[name]
    return selected


def register_builtin_families(registry: "FamilyRegistry", names: Optional[Iterable[str]] = None) -> None:
    """Register the selected built-in families without freezing the registry."""
    for name, constructors in builtin_families(names).items():
        registry.register_family(name, constructors)
