"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import (
    AppConfig,
    EngineConfig,
    FamiliesConfig,
    LoggingConfig,
    validate_config,
)

# Configuration management
from .loader import ConfigurationLoader
from .manager import ConfigurationManager, get_config_manager

__all__ = [
    # Main configuration
    'AppConfig',
    'validate_config',

    # Specific configurations
    'EngineConfig',
    'FamiliesConfig',
    'LoggingConfig',

    # Configuration management
    'ConfigurationManager',
    'ConfigurationLoader',
    'get_config_manager',
]
