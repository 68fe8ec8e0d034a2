"""Component nodes - the uniform leaf/composite tree the engine works on.

ComponentNode is a closed variant: the only concrete kinds are Leaf and
Composite, both defined here. A Composite exclusively owns its children, so
every node has at most one parent and the ownership graph is a tree.
"""
import copy
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Iterator, List, Optional, Tuple, TypeVar, Union

from compositor.domain.base.exceptions import CycleDetected, InvalidOperation, TreeSealed
from compositor.domain.part.prototype import CloneDepth

R = TypeVar("R")


class NodeKind(str, Enum):
    """Node kind enumeration."""
    LEAF = "leaf"
    COMPOSITE = "composite"


class ComponentNode(ABC):
    """Base class for Leaf and Composite."""

    kind: NodeKind

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"ComponentNode is closed to Leaf and Composite; cannot subclass as {cls.__name__}"
            )

    def __init__(self, label: Optional[str] = None):
        self.label = label
        self._parent: Optional["Composite"] = None
        self._sealed = False

    @property
    def parent(self) -> Optional["Composite"]:
        """Owning composite, or None for a root."""
        return self._parent

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def name(self) -> str:
        """Label if one was given, otherwise a name derived from the node."""
        return self.label or self._default_name()

    @abstractmethod
    def _default_name(self) -> str: ...

    @abstractmethod
    def is_leaf(self) -> bool:
        """Return True for a Leaf, False for a Composite."""

    def children(self) -> Tuple["ComponentNode", ...]:
        """
        Return the ordered children of a composite.

        Raises:
            InvalidOperation: If called on a leaf
        """
        raise InvalidOperation(f"Leaf '{self.name}' has no children")

    def add_child(self, node: "ComponentNode") -> None:
        """
        Attach a node as the last child of a composite.

        Raises:
            InvalidOperation: If called on a leaf
        """
        raise InvalidOperation(f"Cannot add a child to leaf '{self.name}'")

    def remove_child(self, node: "ComponentNode") -> "ComponentNode":
        """
        Detach a child from a composite.

        Raises:
            InvalidOperation: If called on a leaf
        """
        raise InvalidOperation(f"Cannot remove a child from leaf '{self.name}'")

    def visit(self, operation: Callable[["ComponentNode"], R]) -> List[R]:
        """
        Apply an operation depth-first, pre-order.

        The operation runs on this node first and then, for a composite, on
        each child subtree in insertion order.

        Args:
            operation: Callable receiving each node

        Returns:
            Operation results in visit order
        """
        results = [operation(self)]
        if not self.is_leaf():
            for child in self.children():
                results.extend(child.visit(operation))
        return results

    def walk(self) -> Iterator["ComponentNode"]:
        """Iterate over this subtree in pre-order."""
        stack: List[ComponentNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            if not node.is_leaf():
                stack.extend(reversed(node.children()))

    def ancestors(self) -> Iterator["Composite"]:
        """Iterate from the parent up to the root."""
        node = self._parent
        while node is not None:
            yield node
            node = node._parent

    def root(self) -> "ComponentNode":
        node: ComponentNode = self
        while node._parent is not None:
            node = node._parent
        return node

    def depth(self) -> int:
        """Number of ancestors; a root has depth 0."""
        return sum(1 for _ in self.ancestors())

    def path(self) -> str:
        """Slash-separated names from the root down to this node."""
        names = [self.name] + [a.name for a in self.ancestors()]
        return "/".join(reversed(names))

    def seal(self) -> "ComponentNode":
        """Make this subtree structurally immutable."""
        for node in self.walk():
            node._sealed = True
        return self

    @abstractmethod
    def clone(self, depth: Union[CloneDepth, str]) -> "ComponentNode":
        """Detached, unsealed copy of this subtree; leaf payloads are cloned with depth."""

    @abstractmethod
    def to_dict(self) -> dict:
        """Plain representation of the subtree."""


class Leaf(ComponentNode):
    """Node wrapping a single payload; never holds children."""

    kind = NodeKind.LEAF

    def __init__(self, payload: Any, label: Optional[str] = None):
        super().__init__(label)
        self.payload = payload

    def is_leaf(self) -> bool:
        return True

    def _default_name(self) -> str:
        role = getattr(self.payload, "role", None)
        return getattr(role, "value", None) or NodeKind.LEAF.value

    def clone(self, depth: Union[CloneDepth, str]) -> "Leaf":
        depth = CloneDepth.parse(depth)
        payload = self.payload
        if hasattr(payload, "clone"):
            payload = payload.clone(depth)
        elif depth is CloneDepth.DEEP:
            payload = copy.deepcopy(payload)
        else:
            payload = copy.copy(payload)
        return Leaf(payload, label=self.label)

    def to_dict(self) -> dict:
        describe = getattr(self.payload, "describe", None)
        return {
            "kind": self.kind.value,
            "name": self.name,
            "payload": describe() if callable(describe) else repr(self.payload),
        }

    def __repr__(self) -> str:
        return f"Leaf({self.payload!r}, label={self.label!r})"


class Composite(ComponentNode):
    """Node owning an ordered, possibly empty, sequence of children."""

    kind = NodeKind.COMPOSITE

    def __init__(self, children: Tuple[ComponentNode, ...] = (), label: Optional[str] = None):
        super().__init__(label)
        self._children: List[ComponentNode] = []
        for child in children:
            self.add_child(child)

    def is_leaf(self) -> bool:
        return False

    def _default_name(self) -> str:
        return NodeKind.COMPOSITE.value

    def children(self) -> Tuple[ComponentNode, ...]:
        return tuple(self._children)

    def add_child(self, node: ComponentNode) -> None:
        """
        Attach a node as the last child.

        Args:
            node: Root of the subtree to attach; must not have a parent

        Raises:
            TreeSealed: If this composite is sealed
            InvalidOperation: If node is not a ComponentNode or is already owned
            CycleDetected: If node is this composite or one of its ancestors
        """
        if self._sealed:
            raise TreeSealed(f"Composite '{self.name}' is sealed")
        if not isinstance(node, ComponentNode):
            raise InvalidOperation(f"Cannot attach {type(node).__name__}; expected a ComponentNode")
        if node is self or any(node is ancestor for ancestor in self.ancestors()):
            raise CycleDetected(self.path(), node.path())
        if node._parent is not None:
            raise InvalidOperation(
                f"Node '{node.name}' is already owned by '{node._parent.name}'"
            )
        self._children.append(node)
        node._parent = self

    def remove_child(self, node: ComponentNode) -> ComponentNode:
        """
        Detach a child and return it as a parentless root.

        Raises:
            TreeSealed: If this composite is sealed
            InvalidOperation: If node is not a child of this composite
        """
        if self._sealed:
            raise TreeSealed(f"Composite '{self.name}' is sealed")
        for index, child in enumerate(self._children):
            if child is node:
                del self._children[index]
                node._parent = None
                return node
        raise InvalidOperation(f"Node '{node.name}' is not a child of '{self.name}'")

    def clone(self, depth: Union[CloneDepth, str]) -> "Composite":
        return Composite(
            tuple(child.clone(depth) for child in self._children), label=self.label
        )

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "children": [child.to_dict() for child in self._children],
        }

    def __repr__(self) -> str:
        return f"Composite(children={len(self._children)}, label={self.label!r})"
