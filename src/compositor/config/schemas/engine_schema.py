"""Engine and family configuration schemas."""
from typing import List

from pydantic import BaseModel, Field, field_validator

from compositor.domain.part.family import FamilyDescriptor
from compositor.domain.part.prototype import CloneDepth


class EngineConfig(BaseModel):
    """Composition engine configuration."""

    default_family: str = Field("dark", description="Family used when none is given")
    clone_depth: CloneDepth = Field(CloneDepth.DEEP, description="Default depth for tree clones")
    seal_assembled_trees: bool = Field(True, description="Seal trees returned by assemble")
    max_depth: int = Field(64, description="Maximum blueprint depth accepted by assemble")

    @field_validator("default_family")
    @classmethod
    def validate_default_family(cls, v: str) -> str:
        """Validate the family tag."""
        return FamilyDescriptor(name=v).name

    @field_validator("clone_depth", mode="before")
    @classmethod
    def parse_clone_depth(cls, v):
        return CloneDepth.parse(v)

    @field_validator("max_depth")
    @classmethod
    def validate_max_depth(cls, v: int) -> int:
        """Validate maximum depth."""
        if v < 1:
            raise ValueError("Maximum depth must be at least 1")
        return v


class FamiliesConfig(BaseModel):
    """Which built-in families to register at startup."""

    enabled: List[str] = Field(
        default_factory=lambda: ["dark", "light"],
        description="Built-in families to register",
    )

    @field_validator("enabled")
    @classmethod
    def validate_enabled(cls, v: List[str]) -> List[str]:
        names = [FamilyDescriptor(name=name).name for name in v]
        if len(set(names)) != len(names):
            raise ValueError("Enabled families must be unique")
        return names
