"""Structural checks over component trees."""
from typing import Dict, Set

from compositor.domain.base.exceptions import InvariantViolation
from compositor.domain.node.component_node import ComponentNode, Leaf


def validate_tree(root: ComponentNode) -> None:
    """
    Check the structural invariants of a tree.

    - every node is reached exactly once (no sharing, no cycles)
    - leaves hold no children
    - each child's parent is the composite that lists it

    Raises:
        InvariantViolation: On the first broken invariant
    """
    seen: Set[int] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            raise InvariantViolation(f"Node '{node.name}' is reachable more than once")
        seen.add(id(node))
        if isinstance(node, Leaf):
            if hasattr(node, "_children"):
                raise InvariantViolation(f"Leaf '{node.name}' holds children")
            continue
        for child in node.children():
            if child.parent is not node:
                raise InvariantViolation(
                    f"Node '{child.name}' is listed under '{node.name}' but owned elsewhere"
                )
            stack.append(child)


def count_nodes(root: ComponentNode) -> Dict[str, int]:
    """Count leaves and composites in a tree."""
    counts = {"leaf": 0, "composite": 0}
    for node in root.walk():
        counts[node.kind.value] += 1
    return counts


def max_depth(root: ComponentNode) -> int:
    """Depth of the deepest node below root (root alone is 0)."""
    deepest = 0
    stack = [(root, 0)]
    while stack:
        node, level = stack.pop()
        deepest = max(deepest, level)
        if not node.is_leaf():
            stack.extend((child, level + 1) for child in node.children())
    return deepest
