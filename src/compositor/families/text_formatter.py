"""Text formatter with its own interface, consumed through a CapabilityAdapter."""
from typing import Optional


class TextFormatter:
    """Formats a string for a tone; knows nothing about parts or families."""

    TONES = {"dark": ("<<", ">>"), "light": ("((", "))")}

    def __init__(self, tone: str, content: str = "", width: Optional[int] = None):
        if tone not in self.TONES:
            raise ValueError(f"Unknown tone '{tone}'")
        self.tone = tone
        self.content = content
        self.width = width

    def format_text(self) -> str:
        opening, closing = self.TONES[self.tone]
        text = self.content
        if self.width is not None:
            text = text[: self.width]
        return f"[{self.tone}] text {opening}{text}{closing}"

    def word_count(self) -> int:
        return len(self.content.split())
