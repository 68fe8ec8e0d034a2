"""Blueprint - the caller's tree-shaped description of what to assemble."""
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from compositor.domain.base.exceptions import BlueprintValidationError


class BlueprintNode(BaseModel):
    """
    One node of a blueprint.

    A node names either a ``role`` (assembled into a leaf holding a part of
    that role) or ``children`` (assembled into a composite, possibly empty),
    never both. Children may be written as bare role names::

        {"label": "toolbar", "children": ["button", {"role": "text", "options": {"content": "hi"}}]}
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    role: Optional[str] = Field(None, description="Part role for a leaf node")
    label: Optional[str] = Field(None, description="Node label used in paths and reports")
    options: Dict[str, Any] = Field(default_factory=dict, description="Part constructor options")
    children: Optional[List["BlueprintNode"]] = Field(None, description="Children of a composite node")

    @field_validator("children", mode="before")
    @classmethod
    def expand_shorthand(cls, v: Any) -> Any:
        """Turn bare role names into leaf nodes."""
        if isinstance(v, list):
            return [{"role": item} if isinstance(item, str) else item for item in v]
        return v

    @model_validator(mode="after")
    def check_kind(self) -> "BlueprintNode":
        """A node is either a leaf (role) or a composite (children)."""
        if self.role is not None and self.children is not None:
            raise ValueError("A blueprint node cannot have both 'role' and 'children'")
        if self.role is None and self.children is None:
            raise ValueError("A blueprint node needs either 'role' or 'children'")
        if self.children is not None and self.options:
            raise ValueError("'options' only apply to leaf nodes")
        return self

    @property
    def is_leaf(self) -> bool:
        return self.role is not None

    def depth(self) -> int:
        """Height of the blueprint; a single leaf has depth 0."""
        if not self.children:
            return 0
        return 1 + max(child.depth() for child in self.children)

    @classmethod
    def from_mapping(cls, data: Union["BlueprintNode", Mapping[str, Any]]) -> "BlueprintNode":
        """
        Build a blueprint from plain data.

        Raises:
            BlueprintValidationError: If the data does not describe a valid tree
        """
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise BlueprintValidationError(
                f"Blueprint must be a mapping, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise BlueprintValidationError(
                f"Invalid blueprint: {e.error_count()} error(s)",
                details=e.errors(include_url=False),
            ) from e


BlueprintNode.model_rebuild()
