"""Staged builder - accumulate configuration, then commit an immutable result."""
import copy
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Optional, Type, TypeVar

from compositor.domain.base.exceptions import (
    BuilderSealed,
    IncompleteConfiguration,
    InvalidOperation,
)

M = TypeVar("M")


class BuilderState(str, Enum):
    """Builder state enumeration."""
    OPEN = "open"
    SEALED = "sealed"


class BuildResult(Mapping):
    """Read-only snapshot of the fields set on a builder."""

    __slots__ = ("_fields",)

    def __init__(self, fields: Dict[str, Any]):
        object.__setattr__(self, "_fields", MappingProxyType(copy.deepcopy(fields)))

    def __getitem__(self, name: str) -> Any:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("BuildResult is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("BuildResult is immutable")

    def __copy__(self) -> "BuildResult":
        return self

    def __deepcopy__(self, memo: dict) -> "BuildResult":
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Independent, mutable copy of the snapshot."""
        return copy.deepcopy(dict(self._fields))

    def to_model(self, model_cls: Type[M]) -> M:
        """Project the snapshot onto a model class (e.g. a pydantic model)."""
        return model_cls(**self.to_dict())

    def __repr__(self) -> str:
        return f"BuildResult({dict(self._fields)!r})"


class StagedBuilder:
    """
    Builder with an explicit OPEN -> SEALED state machine.

    Fields may be set (and overwritten) while the builder is OPEN. A
    successful finalize() seals it; after that every mutation and any second
    finalize() fail with BuilderSealed. A failed finalize() leaves the
    builder OPEN so the missing fields can still be supplied.
    """

    def __init__(self,
                 required_fields: Iterable[str],
                 defaults: Optional[Dict[str, Any]] = None,
                 allowed_fields: Optional[Iterable[str]] = None):
        """
        Initialize the builder.

        Args:
            required_fields: Names that must be set before finalize()
            defaults: Initial field values (count as set)
            allowed_fields: If given, the only names set_field accepts;
                required fields are always allowed
        """
        self._required: List[str] = []
        for name in required_fields:
            self._check_name(name)
            if name not in self._required:
                self._required.append(name)

        self._allowed: Optional[frozenset] = None
        if allowed_fields is not None:
            allowed = set(allowed_fields)
            for name in allowed:
                self._check_name(name)
            self._allowed = frozenset(allowed | set(self._required))

        self._fields: Dict[str, Any] = {}
        self._state = BuilderState.OPEN
        for name, value in (defaults or {}).items():
            self.set_field(name, value)

    @staticmethod
    def _check_name(name: Any) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Field names must be non-empty strings, got {name!r}")

    @property
    def state(self) -> BuilderState:
        return self._state

    @property
    def is_sealed(self) -> bool:
        return self._state is BuilderState.SEALED

    @property
    def required_fields(self) -> List[str]:
        return list(self._required)

    def _ensure_open(self, action: str) -> None:
        if self._state is BuilderState.SEALED:
            raise BuilderSealed(f"Cannot {action}: builder has already been finalized")

    def set_field(self, name: str, value: Any) -> "StagedBuilder":
        """
        Set one field.

        Returns:
            This builder, so calls can be chained

        Raises:
            BuilderSealed: If finalize() already succeeded
            InvalidOperation: If the name is outside allowed_fields
        """
        self._ensure_open(f"set field '{name}'")
        self._check_name(name)
        if self._allowed is not None and name not in self._allowed:
            raise InvalidOperation(
                f"Field '{name}' is not allowed. Allowed fields: {', '.join(sorted(self._allowed))}"
            )
        self._fields[name] = value
        return self

    def set_fields(self, **values: Any) -> "StagedBuilder":
        """Set several fields at once."""
        self._ensure_open("set fields")
        for name, value in values.items():
            self.set_field(name, value)
        return self

    def missing_fields(self) -> List[str]:
        """Required fields not yet set, in declaration order."""
        return [name for name in self._required if name not in self._fields]

    def finalize(self) -> BuildResult:
        """
        Validate and commit the configuration.

        Returns:
            Immutable snapshot of every field set

        Raises:
            BuilderSealed: If called after a successful finalize()
            IncompleteConfiguration: If required fields are missing
        """
        self._ensure_open("finalize")
        missing = self.missing_fields()
        if missing:
            raise IncompleteConfiguration(missing)
        result = BuildResult(self._fields)
        self._state = BuilderState.SEALED
        self._fields = {}
        return result

    def __repr__(self) -> str:
        return (
            f"StagedBuilder(state={self._state.value}, required={self._required}, "
            f"set={sorted(self._fields)})"
        )


def create_builder(required_fields: Iterable[str],
                   *,
                   defaults: Optional[Dict[str, Any]] = None,
                   allowed_fields: Optional[Iterable[str]] = None) -> StagedBuilder:
    """Create a fresh builder; one builder per constructed value."""
    return StagedBuilder(required_fields, defaults=defaults, allowed_fields=allowed_fields)
