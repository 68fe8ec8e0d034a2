"""Dark family - vector-rendered drawables."""
from typing import Optional

from compositor.domain.part.roles import PartRole
from compositor.families.base import Button, Drawable
from compositor.families.text_formatter import TextFormatter
from compositor.infrastructure.adapters.capability_adapter import adapter_constructor
from compositor.infrastructure.rendering.renderers import VectorRenderer

FAMILY = "dark"


class DarkButton(Button):
    family_name = FAMILY


class DarkDrawable(Drawable):
    family_name = FAMILY

    def __init__(self, label: Optional[str] = None, shape: str = "circle", size: float = 1.0):
        super().__init__(VectorRenderer(), label=label, shape=shape, size=size)


def _dark_formatter(content: str = "", width: Optional[int] = None) -> TextFormatter:
    return TextFormatter(FAMILY, content=content, width=width)


DarkText = adapter_constructor(
    _dark_formatter,
    family=FAMILY,
    role=PartRole.TEXT,
    method_map={"apply": "format_text", "count_words": "word_count"},
)

DARK_PARTS = {
    PartRole.BUTTON: DarkButton,
    PartRole.TEXT: DarkText,
    PartRole.DRAWABLE: DarkDrawable,
}
