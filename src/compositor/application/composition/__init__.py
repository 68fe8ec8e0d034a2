"""Tree composition."""

from .engine import CompositionEngine, DispatchEntry, DispatchReport

__all__ = ["CompositionEngine", "DispatchEntry", "DispatchReport"]
