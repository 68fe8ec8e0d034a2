"""Rendering implementations."""

from .renderers import RasterRenderer, Renderer, RenderLog, VectorRenderer

__all__ = ["RasterRenderer", "Renderer", "RenderLog", "VectorRenderer"]
