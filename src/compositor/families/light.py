"""Light family - raster-rendered drawables."""
from typing import Optional

from compositor.domain.part.roles import PartRole
from compositor.families.base import Button, Drawable
from compositor.families.text_formatter import TextFormatter
from compositor.infrastructure.adapters.capability_adapter import adapter_constructor
from compositor.infrastructure.rendering.renderers import RasterRenderer

FAMILY = "light"


class LightButton(Button):
    family_name = FAMILY


class LightDrawable(Drawable):
    family_name = FAMILY

    def __init__(self,
                 label: Optional[str] = None,
                 shape: str = "circle",
                 size: float = 1.0,
                 pixels_per_unit: int = 10):
        super().__init__(RasterRenderer(pixels_per_unit), label=label, shape=shape, size=size)


def _light_formatter(content: str = "", width: Optional[int] = None) -> TextFormatter:
    return TextFormatter(FAMILY, content=content, width=width)


LightText = adapter_constructor(
    _light_formatter,
    family=FAMILY,
    role=PartRole.TEXT,
    method_map={"apply": "format_text", "count_words": "word_count"},
)

LIGHT_PARTS = {
    PartRole.BUTTON: LightButton,
    PartRole.TEXT: LightText,
    PartRole.DRAWABLE: LightDrawable,
}
