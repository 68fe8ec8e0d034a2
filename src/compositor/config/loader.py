"""Configuration loading from files and environment."""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from compositor.config.env_expansion import expand_env_vars
from compositor.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Loads raw configuration data.

    Sources, in increasing precedence:
    - the first existing default file (``compositor.yaml``, ``compositor.yml``,
      ``compositor.json`` in the working directory, or the file named by
      ``COMPOSITOR_CONFIG``)
    - environment overrides ``COMPOSITOR_<SECTION>_<KEY>=value``
    """

    ENV_PREFIX = "COMPOSITOR_"
    DEFAULT_FILES = ["compositor.yaml", "compositor.yml", "compositor.json"]
    SECTIONS = ("engine", "logging", "families")

    def __init__(self, search_paths: Optional[List[str]] = None):
        self._search_paths = search_paths or [os.getcwd()]

    def load_from_file(self, file_path: str) -> Dict[str, Any]:
        """
        Load configuration from a YAML or JSON file.

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        path = Path(file_path)
        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {file_path}") from e
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {file_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {file_path} must contain a mapping at top level"
            )
        logger.debug("Loaded configuration from %s", file_path)
        return expand_env_vars(data)

    def find_default_file(self) -> Optional[str]:
        explicit = os.environ.get(f"{self.ENV_PREFIX}CONFIG")
        if explicit:
            return explicit
        for directory in self._search_paths:
            for name in self.DEFAULT_FILES:
                candidate = os.path.join(directory, name)
                if os.path.exists(candidate):
                    return candidate
        return None

    def load_configuration(self) -> Dict[str, Any]:
        """Load configuration from the default location, or return empty data."""
        config_file = self.find_default_file()
        if config_file is None:
            logger.debug("No configuration file found, using defaults")
            return {}
        return self.load_from_file(config_file)

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply ``COMPOSITOR_<SECTION>_<KEY>`` overrides.

        Values are parsed as YAML scalars so ``true``, ``12`` and ``[a, b]``
        keep their types.
        """
        result = {key: dict(value) if isinstance(value, dict) else value
                  for key, value in config_data.items()}
        for env_name, raw_value in os.environ.items():
            if not env_name.startswith(self.ENV_PREFIX):
                continue
            remainder = env_name[len(self.ENV_PREFIX):].lower()
            for section in self.SECTIONS:
                if remainder.startswith(f"{section}_"):
                    key = remainder[len(section) + 1:]
                    if not key:
                        break
                    section_data = result.setdefault(section, {})
                    if not isinstance(section_data, dict):
                        raise ConfigurationError(f"Configuration section '{section}' must be a mapping")
                    section_data[key] = self._parse_value(raw_value)
                    logger.debug("Applied environment override %s", env_name)
                    break
        return result

    @staticmethod
    def _parse_value(raw_value: str) -> Any:
        try:
            return yaml.safe_load(raw_value)
        except yaml.YAMLError:
            return raw_value
