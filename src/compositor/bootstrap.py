"""Application bootstrap - wire configuration, logging, registry and engine."""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Mapping, Optional

from compositor.config.manager import ConfigurationManager
from compositor.config.schemas import AppConfig, EngineConfig, FamiliesConfig, LoggingConfig
from compositor.families.registration import builtin_families
from compositor.infrastructure.logging.logger import get_logger, setup_logging
from compositor.infrastructure.registry.family_registry import FamilyRegistry, get_family_registry

_init_lock = threading.Lock()


def initialize_registry(extra_families: Optional[Mapping[str, Mapping[Any, Callable[..., Any]]]] = None,
                        enabled: Optional[list] = None,
                        registry: Optional[FamilyRegistry] = None) -> FamilyRegistry:
    """
    Register the enabled built-in families plus any extra ones, then freeze.

    Safe to call repeatedly with the same arguments.
    """
    registry = registry or get_family_registry()
    families: Dict[str, Mapping[Any, Callable[..., Any]]] = builtin_families(enabled)
    families.update(extra_families or {})
    with _init_lock:
        registry.initialize(families)
    return registry


class Application:
    """Application context: configuration, logging, registry and engine."""

    def __init__(self,
                 config_path: Optional[str] = None,
                 overrides: Optional[Dict[str, Any]] = None,
                 extra_families: Optional[Mapping[str, Mapping[Any, Callable[..., Any]]]] = None) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self._config_manager = ConfigurationManager(config_path, overrides=overrides)
        self._extra_families = extra_families
        self._initialized = False
        self._engine = None

        # Only create logger immediately (lightweight)
        self.logger = get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        return self._config_manager.app_config

    def initialize(self) -> "Application":
        """Load configuration, configure logging and initialize the family registry."""
        if self._initialized:
            return self

        setup_logging(self._config_manager.get_typed(LoggingConfig))
        families_config = self._config_manager.get_typed(FamiliesConfig)
        registry = initialize_registry(self._extra_families, enabled=families_config.enabled)

        self._initialized = True
        self.logger.info(
            "Application initialized",
            families=registry.get_registered_families(),
            config_file=self.config_path,
        )
        return self

    @property
    def engine(self):
        """Composition engine configured from the engine section."""
        from compositor.application.composition.engine import CompositionEngine

        if self._engine is None:
            self.initialize()
            self._engine = CompositionEngine(
                get_family_registry(), self._config_manager.get_typed(EngineConfig)
            )
        return self._engine
