"""Renderer implementations for drawable parts.

Drawables hold a Renderer and only ever call it through ``render_*``; which
concrete renderer a drawable gets is decided by its family.
"""
from abc import ABC, abstractmethod
from typing import List

from compositor.infrastructure.patterns.singleton_access import get_singleton


class RenderLog:
    """Shared record of every render call, in call order."""

    def __init__(self):
        self._entries: List[str] = []

    def record(self, entry: str) -> None:
        self._entries.append(entry)

    @property
    def entries(self) -> List[str]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()


class Renderer(ABC):
    """Implementor side of the drawable bridge."""

    name: str = "renderer"

    @abstractmethod
    def render_circle(self, radius: float) -> str:
        """Render a circle and return a description of the output."""

    @abstractmethod
    def render_square(self, side: float) -> str:
        """Render a square and return a description of the output."""

    def _emit(self, output: str) -> str:
        get_singleton(RenderLog).record(output)
        return output


class VectorRenderer(Renderer):
    """Renders shapes as vector paths."""

    name = "vector"

    def render_circle(self, radius: float) -> str:
        return self._emit(f"vector circle r={radius:g}")

    def render_square(self, side: float) -> str:
        return self._emit(f"vector square side={side:g}")


class RasterRenderer(Renderer):
    """Renders shapes as pixel grids."""

    name = "raster"

    def __init__(self, pixels_per_unit: int = 10):
        self.pixels_per_unit = pixels_per_unit

    def render_circle(self, radius: float) -> str:
        diameter = int(round(2 * radius * self.pixels_per_unit))
        return self._emit(f"raster circle {diameter}x{diameter}px")

    def render_square(self, side: float) -> str:
        width = int(round(side * self.pixels_per_unit))
        return self._emit(f"raster square {width}x{width}px")
