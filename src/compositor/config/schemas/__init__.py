"""Configuration schemas."""

from .app_schema import AppConfig, validate_config
from .engine_schema import EngineConfig, FamiliesConfig
from .logging_schema import LoggingConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "EngineConfig",
    "FamiliesConfig",
    "LoggingConfig",
]
