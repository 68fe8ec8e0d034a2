"""Part abstractions shared by the built-in families."""
from typing import Any, ClassVar, Dict, FrozenSet, Optional

from compositor.domain.base.exceptions import InvalidOperation
from compositor.domain.part.part import Part
from compositor.domain.part.roles import PartRole
from compositor.infrastructure.rendering.renderers import Renderer


class Button(Part):
    """Clickable part; ``apply`` presses it."""

    role = PartRole.BUTTON
    family_name: ClassVar[str]

    def __init__(self, label: Optional[str] = None, style: Optional[Dict[str, Any]] = None):
        super().__init__(self.family_name, label)
        self.style: Dict[str, Any] = dict(style or {})
        self.presses = 0

    def apply(self) -> str:
        self.presses += 1
        return f"[{self.family}] button '{self.label or 'button'}' pressed"


class Drawable(Part):
    """
    Shape abstraction bridged to a Renderer implementation.

    The family picks the renderer; the drawable only knows which
    ``render_*`` call its shape needs.
    """

    role = PartRole.DRAWABLE
    capabilities: ClassVar[FrozenSet[str]] = frozenset({"apply", "draw"})
    family_name: ClassVar[str]
    SHAPES = ("circle", "square")

    def __init__(self,
                 renderer: Renderer,
                 label: Optional[str] = None,
                 shape: str = "circle",
                 size: float = 1.0):
        super().__init__(self.family_name, label)
        if shape not in self.SHAPES:
            raise InvalidOperation(f"Unknown shape '{shape}'. Available shapes: {', '.join(self.SHAPES)}")
        if size <= 0:
            raise InvalidOperation("Shape size must be positive")
        self.renderer = renderer
        self.shape = shape
        self.size = size

    def draw(self) -> str:
        if self.shape == "circle":
            output = self.renderer.render_circle(self.size)
        else:
            output = self.renderer.render_square(self.size)
        return f"[{self.family}] {output}"

    def apply(self) -> str:
        return self.draw()

    def describe(self) -> Dict[str, Any]:
        summary = super().describe()
        summary.update(shape=self.shape, size=self.size, renderer=self.renderer.name)
        return summary
