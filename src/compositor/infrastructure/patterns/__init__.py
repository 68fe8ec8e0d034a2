"""Infrastructure patterns package."""

from compositor.infrastructure.patterns.singleton_access import get_singleton
from compositor.infrastructure.patterns.singleton_registry import SingletonRegistry

__all__ = ["SingletonRegistry", "get_singleton"]
