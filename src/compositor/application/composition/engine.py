"""Composition engine - assemble component trees and dispatch operations over them."""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from compositor.application.factory.family_factory import FamilyFactory
from compositor.config.schemas.engine_schema import EngineConfig
from compositor.domain.base.exceptions import (
    BlueprintValidationError,
    InvalidOperation,
    UnsupportedOperation,
)
from compositor.domain.blueprint.blueprint import BlueprintNode
from compositor.domain.builder.staged_builder import BuildResult, StagedBuilder, create_builder
from compositor.domain.node.component_node import ComponentNode, Composite, Leaf
from compositor.domain.node.traversal import validate_tree
from compositor.domain.part.family import FamilyDescriptor
from compositor.domain.part.prototype import CloneDepth
from compositor.infrastructure.error.handling import log_errors
from compositor.infrastructure.logging.logger import get_logger
from compositor.infrastructure.registry.family_registry import FamilyRegistry, get_family_registry


class DispatchEntry(BaseModel):
    """Outcome of running an operation on one leaf."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    path: str
    role: Optional[str] = None
    family: Optional[str] = None
    result: Any = None


class DispatchReport(BaseModel):
    """Every leaf an operation ran on, in pre-order."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    operation: str
    entries: List[DispatchEntry] = Field(default_factory=list)

    @property
    def results(self) -> List[Any]:
        return [entry.result for entry in self.entries]

    @property
    def roles(self) -> List[Optional[str]]:
        return [entry.role for entry in self.entries]

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


def _supports(payload: Any, operation: str) -> bool:
    supports = getattr(payload, "supports", None)
    if callable(supports):
        return bool(supports(operation))
    return callable(getattr(payload, operation, None))


def _invoke(payload: Any, operation: str) -> Any:
    invoke = getattr(payload, "invoke", None)
    if callable(invoke):
        return invoke(operation)
    return getattr(payload, operation)()


class CompositionEngine:
    """
    Orchestrates FamilyFactory and StagedBuilder into component trees.

    ``assemble`` is atomic: nodes are built bottom-up from fresh objects and
    the tree is only returned once it is complete and validated, so a failure
    leaves nothing behind. ``dispatch`` checks every leaf before running the
    operation on any of them.
    """

    LEAF_FIELDS = ("part", "label")

    def __init__(self,
                 registry: Optional[FamilyRegistry] = None,
                 config: Optional[EngineConfig] = None):
        self._registry = registry or get_family_registry()
        self._config = config or EngineConfig()
        self._logger = get_logger(__name__)

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def registry(self) -> FamilyRegistry:
        return self._registry

    def factory(self, descriptor: Union[FamilyDescriptor, str, None] = None) -> FamilyFactory:
        """Factory for a family (the configured default when none is given)."""
        return FamilyFactory(descriptor or self._config.default_family, self._registry)

    @log_errors("assemble")
    def assemble(self,
                 descriptor: Union[FamilyDescriptor, str, None],
                 blueprint: Union[BlueprintNode, Mapping[str, Any]]) -> ComponentNode:
        """
        Assemble a tree from a blueprint using one family's parts.

        Args:
            descriptor: Family to build parts from; None for the default family
            blueprint: BlueprintNode or equivalent mapping

        Returns:
            Root of the assembled tree (sealed if configured)

        Raises:
            UnknownFamily: If the family is not registered
            UnknownRole: If the blueprint names a role the family lacks
            BlueprintValidationError: If the blueprint is malformed, too deep,
                or a part cannot be built from its options
        """
        factory = self.factory(descriptor)
        blueprint = BlueprintNode.from_mapping(blueprint)
        height = blueprint.depth()
        if height > self._config.max_depth:
            raise BlueprintValidationError(
                f"Blueprint depth {height} exceeds maximum of {self._config.max_depth}"
            )

        root = self._assemble_node(factory, blueprint)
        validate_tree(root)
        if self._config.seal_assembled_trees:
            root.seal()

        self._logger.debug("Assembled tree", family=factory.family, depth=height)
        return root

    def _assemble_node(self, factory: FamilyFactory, blueprint: BlueprintNode) -> ComponentNode:
        if blueprint.is_leaf:
            options = dict(blueprint.options)
            if blueprint.label is not None:
                options.setdefault("label", blueprint.label)
            try:
                part = factory.create_part(blueprint.role, **options)
            except (TypeError, ValueError) as e:
                raise BlueprintValidationError(
                    f"Cannot build '{blueprint.role}' part of family '{factory.family}': {e}"
                ) from e
            except InvalidOperation as e:
                raise BlueprintValidationError(
                    f"Cannot build '{blueprint.role}' part of family '{factory.family}': {e.message}"
                ) from e
            return Leaf(part, label=blueprint.label)

        composite = Composite(label=blueprint.label)
        for child in blueprint.children:
            composite.add_child(self._assemble_node(factory, child))
        return composite

    @log_errors("dispatch")
    def dispatch(self, root: ComponentNode, operation_name: str) -> DispatchReport:
        """
        Run a named operation on every leaf of a tree, in pre-order.

        Composite nodes are traversed but not invoked.

        Raises:
            UnsupportedOperation: If no registered part exposes the operation,
                or some leaf in this tree does not; nothing runs in either case
        """
        if not isinstance(operation_name, str) or operation_name not in self._registry.supported_operations():
            raise UnsupportedOperation(str(operation_name), "no registered part exposes it")

        unsupported = [
            node.path() for node in root.walk()
            if node.is_leaf() and not _supports(node.payload, operation_name)
        ]
        if unsupported:
            raise UnsupportedOperation(
                operation_name,
                f"{len(unsupported)} part(s) in this tree do not expose it",
                details={"paths": unsupported},
            )

        def run(node: ComponentNode) -> Optional[DispatchEntry]:
            if not node.is_leaf():
                return None
            payload = node.payload
            role = getattr(payload, "role", None)
            return DispatchEntry(
                path=node.path(),
                role=getattr(role, "value", role),
                family=getattr(payload, "family", None),
                result=_invoke(payload, operation_name),
            )

        entries = [entry for entry in root.visit(run) if entry is not None]
        self._logger.debug("Dispatched operation", operation=operation_name, leaves=len(entries))
        return DispatchReport(operation=operation_name, entries=entries)

    def create_leaf(self, part: Any, label: Optional[str] = None) -> Leaf:
        return Leaf(part, label=label)

    def create_composite(self,
                         children: Iterable[ComponentNode] = (),
                         label: Optional[str] = None) -> Composite:
        return Composite(tuple(children), label=label)

    def leaf_builder(self) -> StagedBuilder:
        """Builder for build_leaf: requires ``part``, accepts ``label``."""
        return create_builder(["part"], allowed_fields=self.LEAF_FIELDS)

    def build_leaf(self, result: BuildResult) -> Leaf:
        """
        Turn a finalized builder result into a leaf.

        Raises:
            InvalidOperation: If the result has no ``part`` field
        """
        if "part" not in result:
            raise InvalidOperation("Build result has no 'part' field")
        return Leaf(result["part"], label=result.get("label"))

    def clone_tree(self,
                   root: ComponentNode,
                   depth: Union[CloneDepth, str, None] = None) -> ComponentNode:
        """Detached, unsealed copy of a tree; parts are cloned with depth (or the configured default)."""
        return root.clone(depth or self._config.clone_depth)
