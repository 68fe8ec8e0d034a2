"""Tests for configuration loading and management."""

import json
import os
from unittest.mock import patch

import pytest

from compositor.config import (
    AppConfig,
    ConfigurationLoader,
    ConfigurationManager,
    EngineConfig,
    FamiliesConfig,
    LoggingConfig,
    get_config_manager,
    validate_config,
)
from compositor.domain.base.exceptions import ConfigurationError
from compositor.domain.part import CloneDepth


@pytest.fixture
def clean_env():
    """Environment without any COMPOSITOR_ variables."""
    env = {key: value for key, value in os.environ.items() if not key.startswith("COMPOSITOR_")}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def yaml_config(tmp_path):
    path = tmp_path / "compositor.yaml"
    path.write_text(
        "engine:\n"
        "  default_family: ${TEST_DEFAULT_FAMILY:light}\n"
        "  clone_depth: shallow\n"
        "logging:\n"
        "  level: debug\n"
        "families:\n"
        "  enabled: [light]\n"
    )
    return path


class TestSchemas:

    def test_defaults(self):
        config = AppConfig()
        assert config.engine.default_family == "dark"
        assert config.engine.clone_depth is CloneDepth.DEEP
        assert config.engine.seal_assembled_trees is True
        assert config.families.enabled == ["dark", "light"]
        assert config.logging.level == "INFO"

    def test_values_are_normalized(self):
        config = validate_config({
            "engine": {"default_family": "Light", "clone_depth": "SHALLOW"},
            "logging": {"level": "warning", "format": "JSON"},
        })
        assert config.engine.default_family == "light"
        assert config.engine.clone_depth is CloneDepth.SHALLOW
        assert config.logging.level == "WARNING"
        assert config.logging.format == "json"

    @pytest.mark.parametrize("data", [
        {"engine": {"max_depth": 0}},
        {"engine": {"clone_depth": "medium"}},
        {"engine": {"default_family": "not a family"}},
        {"logging": {"level": "LOUD"}},
        {"logging": {"destination": "syslog"}},
        {"families": {"enabled": []}},
        {"families": {"enabled": ["dark", "DARK"]}},
    ])
    def test_invalid_values(self, data):
        with pytest.raises(ValueError):
            validate_config(data)


class TestConfigurationLoader:

    def test_load_yaml_with_env_expansion(self, yaml_config, clean_env):
        data = ConfigurationLoader().load_from_file(str(yaml_config))
        assert data["engine"]["default_family"] == "light"
        assert data["families"]["enabled"] == ["light"]

    def test_load_json(self, tmp_path):
        path = tmp_path / "compositor.json"
        path.write_text(json.dumps({"engine": {"max_depth": 3}}))
        assert ConfigurationLoader().load_from_file(str(path)) == {"engine": {"max_depth": 3}}

    def test_empty_file_is_empty_config(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert ConfigurationLoader().load_from_file(str(path)) == {}

    def test_missing_and_malformed_files(self, tmp_path):
        loader = ConfigurationLoader()
        with pytest.raises(ConfigurationError, match="not found"):
            loader.load_from_file(str(tmp_path / "missing.yaml"))

        broken = tmp_path / "broken.yaml"
        broken.write_text("engine: [unclosed\n")
        with pytest.raises(ConfigurationError, match="parse"):
            loader.load_from_file(str(broken))

        scalar = tmp_path / "scalar.yaml"
        scalar.write_text("just a string\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            loader.load_from_file(str(scalar))

    def test_default_file_discovery(self, yaml_config, clean_env):
        loader = ConfigurationLoader(search_paths=[str(yaml_config.parent)])
        assert loader.find_default_file() == str(yaml_config)
        assert loader.load_configuration()["engine"]["clone_depth"] == "shallow"

    def test_no_default_file(self, tmp_path, clean_env):
        assert ConfigurationLoader(search_paths=[str(tmp_path)]).load_configuration() == {}

    def test_explicit_config_variable(self, tmp_path, yaml_config, clean_env):
        with patch.dict(os.environ, {"COMPOSITOR_CONFIG": str(yaml_config)}):
            loader = ConfigurationLoader(search_paths=[str(tmp_path / "elsewhere")])
            assert loader.find_default_file() == str(yaml_config)

    def test_environment_overrides_keep_types(self, clean_env):
        overrides = {
            "COMPOSITOR_ENGINE_MAX_DEPTH": "5",
            "COMPOSITOR_ENGINE_SEAL_ASSEMBLED_TREES": "false",
            "COMPOSITOR_FAMILIES_ENABLED": "[light]",
            "COMPOSITOR_LOGGING_LEVEL": "ERROR",
        }
        with patch.dict(os.environ, overrides):
            data = ConfigurationLoader().apply_environment_overrides({"engine": {"max_depth": 10}})
        assert data == {
            "engine": {"max_depth": 5, "seal_assembled_trees": False},
            "families": {"enabled": ["light"]},
            "logging": {"level": "ERROR"},
        }

    def test_overrides_do_not_mutate_input(self, clean_env):
        original = {"engine": {"max_depth": 10}}
        with patch.dict(os.environ, {"COMPOSITOR_ENGINE_MAX_DEPTH": "2"}):
            ConfigurationLoader().apply_environment_overrides(original)
        assert original == {"engine": {"max_depth": 10}}


class TestConfigurationManager:

    def test_loads_file_lazily(self, yaml_config, clean_env):
        manager = ConfigurationManager(str(yaml_config))
        engine = manager.get_typed(EngineConfig)

        assert engine.default_family == "light"
        assert engine.clone_depth is CloneDepth.SHALLOW
        assert manager.get_typed(EngineConfig) is engine
        assert manager.get_typed(LoggingConfig).level == "DEBUG"
        assert manager.get_typed(FamiliesConfig).enabled == ["light"]

    def test_overrides_take_precedence(self, yaml_config, clean_env):
        with patch.dict(os.environ, {"COMPOSITOR_ENGINE_MAX_DEPTH": "7"}):
            manager = ConfigurationManager(
                str(yaml_config), overrides={"engine": {"max_depth": 3}},
            )
            assert manager.get_typed(EngineConfig).max_depth == 3

    def test_defaults_without_file(self, tmp_path, clean_env):
        manager = ConfigurationManager(loader=ConfigurationLoader(search_paths=[str(tmp_path)]))
        assert manager.app_config == AppConfig()
        assert manager.get("engine")["default_family"] == "dark"
        assert manager.get("missing", "fallback") == "fallback"

    def test_invalid_configuration(self, tmp_path, clean_env):
        path = tmp_path / "bad.yaml"
        path.write_text("engine:\n  max_depth: 0\n")
        with pytest.raises(ConfigurationError) as exc:
            ConfigurationManager(str(path)).app_config
        assert exc.value.details

    def test_unknown_section_type(self, tmp_path, clean_env):
        manager = ConfigurationManager(loader=ConfigurationLoader(search_paths=[str(tmp_path)]))
        with pytest.raises(ConfigurationError):
            manager.get_typed(dict)

    def test_reload_picks_up_changes(self, yaml_config, clean_env):
        manager = ConfigurationManager(str(yaml_config))
        assert manager.get_typed(EngineConfig).max_depth == 64

        yaml_config.write_text("engine:\n  max_depth: 4\n")
        manager.reload()
        assert manager.get_typed(EngineConfig).max_depth == 4

    def test_process_wide_manager(self, yaml_config, clean_env):
        manager = get_config_manager(str(yaml_config))
        assert get_config_manager() is manager
        assert get_config_manager(str(yaml_config)) is manager
        assert manager.get_typed(FamiliesConfig).enabled == ["light"]
