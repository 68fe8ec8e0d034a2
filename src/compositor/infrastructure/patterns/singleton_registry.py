"""Singleton registry - one shared instance per class, created on first access."""
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from compositor.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Registry holding the single instance of each registered class.

    Thread-safe singleton implementation.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._creation_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get singleton instance of the registry itself."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of a class, constructing it on first access.

        Constructor arguments are only used by the call that creates the
        instance; later calls return the existing one unchanged.
        """
        instance = self._instances.get(singleton_class)
        if instance is None:
            with self._creation_lock:
                instance = self._instances.get(singleton_class)
                if instance is None:
                    instance = singleton_class(*args, **kwargs)
                    self._instances[singleton_class] = instance
                    self._logger.debug("Created singleton", singleton=singleton_class.__name__)
        return instance

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Register a pre-built instance, e.g. a test double."""
        with self._creation_lock:
            self._instances[singleton_class] = instance

    def has(self, singleton_class: Type) -> bool:
        return singleton_class in self._instances

    def reset(self, singleton_class: Optional[Type] = None) -> None:
        """Forget one or all instances. Used primarily for testing."""
        with self._creation_lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)
