"""Compositor - Root Package.

An in-process engine that builds component trees from families of mutually
consistent parts.

Key Components:
    - domain: component nodes, parts, staged builders and blueprints
    - infrastructure: family registry, logging, adapters and renderers
    - application: family factory and composition engine
    - families: the built-in dark and light families
    - config: pydantic configuration schemas, loader and manager

Usage:
    >>> from compositor import CompositionEngine, initialize_registry
    >>> registry = initialize_registry()
    >>> engine = CompositionEngine()
    >>> tree = engine.assemble("dark", {"children": ["button", "text"]})
    >>> engine.dispatch(tree, "apply").roles
    ['button', 'text']
"""

from ._version import __version__
from .application.composition import CompositionEngine, DispatchEntry, DispatchReport
from .application.factory import FamilyFactory
from .bootstrap import Application, initialize_registry
from .domain.base import (
    BlueprintValidationError,
    BuilderSealed,
    CompositorError,
    ConfigurationError,
    CycleDetected,
    FamilyConsistencyError,
    FamilyRegistrationError,
    IncompleteConfiguration,
    InvalidOperation,
    InvariantViolation,
    RegistryFrozen,
    TreeSealed,
    UnknownFamily,
    UnknownRole,
    UnsupportedOperation,
)
from .domain.blueprint import BlueprintNode
from .domain.builder import BuilderState, BuildResult, StagedBuilder, create_builder
from .domain.node import ComponentNode, Composite, Leaf, NodeKind, validate_tree
from .domain.part import CloneDepth, FamilyDescriptor, Part, PartHandle, PartRole
from .infrastructure.registry import FamilyRegistry, get_family_registry

__all__ = [
    "__version__",
    # Engine
    "Application",
    "CompositionEngine",
    "DispatchEntry",
    "DispatchReport",
    "FamilyFactory",
    "FamilyRegistry",
    "get_family_registry",
    "initialize_registry",
    # Domain
    "BlueprintNode",
    "BuilderState",
    "BuildResult",
    "StagedBuilder",
    "create_builder",
    "ComponentNode",
    "Composite",
    "Leaf",
    "NodeKind",
    "validate_tree",
    "CloneDepth",
    "FamilyDescriptor",
    "Part",
    "PartHandle",
    "PartRole",
    # Exceptions
    "CompositorError",
    "InvalidOperation",
    "CycleDetected",
    "UnknownRole",
    "UnknownFamily",
    "FamilyConsistencyError",
    "BuilderSealed",
    "TreeSealed",
    "IncompleteConfiguration",
    "UnsupportedOperation",
    "InvariantViolation",
    "BlueprintValidationError",
    "ConfigurationError",
    "FamilyRegistrationError",
    "RegistryFrozen",
]
