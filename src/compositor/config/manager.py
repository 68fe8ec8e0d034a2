"""Unified configuration management for the application."""
import logging
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import ValidationError

from compositor.config.loader import ConfigurationLoader
from compositor.config.schemas import AppConfig, EngineConfig, FamiliesConfig, LoggingConfig
from compositor.domain.base.exceptions import ConfigurationError

T = TypeVar("T")
logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Single source of truth for configuration.

    Configuration is loaded lazily on first access, validated through the
    pydantic schemas, and typed sections are cached.
    """

    _SECTION_ATTRIBUTES: Dict[Type, str] = {
        EngineConfig: "engine",
        LoggingConfig: "logging",
        FamiliesConfig: "families",
    }

    def __init__(self,
                 config_file: Optional[str] = None,
                 loader: Optional[ConfigurationLoader] = None,
                 overrides: Optional[Dict[str, Any]] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = loader
        self._overrides = overrides or {}
        self._config_cache: Dict[Type, Any] = {}

    @property
    def loader(self) -> ConfigurationLoader:
        """Lazy load configuration loader."""
        if self._loader is None:
            self._loader = ConfigurationLoader()
        return self._loader

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        if self._config_file:
            config_data = self.loader.load_from_file(self._config_file)
        else:
            config_data = self.loader.load_configuration()

        config_data = self.loader.apply_environment_overrides(config_data)
        for section, values in self._overrides.items():
            if isinstance(values, dict):
                config_data.setdefault(section, {}).update(values)
            else:
                config_data[section] = values

        try:
            app_config = AppConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} error(s)",
                details=e.errors(include_url=False),
            ) from e
        logger.debug("Configuration loaded (version %s)", app_config.version)
        return app_config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get typed configuration section with caching."""
        if config_type not in self._config_cache:
            with self._lock:
                if config_type not in self._config_cache:
                    attribute = self._SECTION_ATTRIBUTES.get(config_type)
                    if attribute is None:
                        raise ConfigurationError(
                            f"Unknown configuration type: {config_type.__name__}"
                        )
                    self._config_cache[config_type] = getattr(self.app_config, attribute)
        return self._config_cache[config_type]

    def get(self, key: str, default: Any = None) -> Any:
        """Get a raw section by name."""
        value = getattr(self.app_config, key, None)
        if value is None:
            return default
        return value.model_dump() if hasattr(value, "model_dump") else value

    def reload(self) -> None:
        """Drop cached configuration so the next access reloads it."""
        with self._lock:
            self._app_config = None
            self._config_cache.clear()


_config_manager: Optional[ConfigurationManager] = None
_config_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Get the process-wide configuration manager."""
    global _config_manager
    if _config_manager is None or (config_file and config_file != _config_manager._config_file):
        with _config_manager_lock:
            if _config_manager is None or (config_file and config_file != _config_manager._config_file):
                _config_manager = ConfigurationManager(config_file)
    return _config_manager
