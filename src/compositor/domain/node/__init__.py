"""Component tree domain."""

from .component_node import ComponentNode, Composite, Leaf, NodeKind
from .traversal import count_nodes, max_depth, validate_tree

__all__ = [
    "ComponentNode",
    "Composite",
    "Leaf",
    "NodeKind",
    "count_nodes",
    "max_depth",
    "validate_tree",
]
