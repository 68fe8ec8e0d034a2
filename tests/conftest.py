import logging

import pytest

from compositor.application.composition.engine import CompositionEngine
from compositor.bootstrap import initialize_registry
from compositor.config.schemas import EngineConfig
from compositor.infrastructure.logging.logger import configure_structlog
from compositor.infrastructure.patterns.singleton_registry import SingletonRegistry
from compositor.infrastructure.registry.family_registry import FamilyRegistry


@pytest.fixture(autouse=True)
def clean_registries():
    """Start and finish every test with empty process-wide registries."""
    FamilyRegistry.get_instance().clear_registrations()
    SingletonRegistry.get_instance().reset()
    yield
    FamilyRegistry.get_instance().clear_registrations()
    SingletonRegistry.get_instance().reset()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handlers and levels installed by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    configure_structlog()


@pytest.fixture
def registry():
    """Registry initialized with the built-in families and frozen."""
    return initialize_registry()


@pytest.fixture
def engine(registry):
    return CompositionEngine(registry)


@pytest.fixture
def unsealed_engine(registry):
    return CompositionEngine(registry, EngineConfig(seal_assembled_trees=False))


@pytest.fixture
def toolbar_blueprint():
    return {
        "label": "window",
        "children": [
            {"label": "toolbar", "children": [
                {"role": "button", "label": "save"},
                {"role": "button", "label": "open"},
            ]},
            {"role": "text", "label": "title", "options": {"content": "Untitled"}},
            {"role": "drawable", "label": "logo", "options": {"shape": "square", "size": 2}},
        ],
    }
