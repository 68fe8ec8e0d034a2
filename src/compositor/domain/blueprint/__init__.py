"""Blueprint domain."""

from .blueprint import BlueprintNode

__all__ = ["BlueprintNode"]
