from __future__ import annotations

import logging

from .component import (
    Component,
    POSITION_CENTER,
    POSITION_JUSTIFIED,
    POSITION_LEFT,
    POSITION_RIGHT,
    is_number,
    normalize_token,
)


log = logging.getLogger(__name__)


class FontStyle:
    """Preset font heights in dots."""
    SMALL = 30
    NORMAL = 40
    LARGE = 50
    XLARGE = 70
    XXLARGE = 90


DEFAULT_FONT_SIZE = FontStyle.SMALL
DEFAULT_SPECIAL_CHAR_SUPPORT = True

# ^FB accepts these; the printer places the text inside the block
TEXT_ALIGNMENTS = (POSITION_LEFT, POSITION_CENTER, POSITION_RIGHT, POSITION_JUSTIFIED)


class Text(Component):
    """
    A single line of text in font 0, laid out in a field block (^FB) as wide
    as the canvas this component sees.

    With special character support on, the data is sent through ^FH_ so
    hex escapes like "_15" reach the printer as raw bytes.
    """

    def __init__(
        self,
        text: str = "",
        *,
        font_size: int = DEFAULT_FONT_SIZE,
        special_character_support: bool = DEFAULT_SPECIAL_CHAR_SUPPORT,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._text = ""
        self._font_size = DEFAULT_FONT_SIZE
        self.special_character_support = bool(special_character_support)
        self.text = text
        self.font_size = font_size

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        if value:
            self._text = str(value)

    @property
    def font_size(self) -> int:
        return self._font_size

    @font_size.setter
    def font_size(self, value: int) -> None:
        if not is_number(value):
            self._warn(f"font size must be a number of dots, got {value!r}")
        elif value >= 0:
            self._font_size = int(value)

    def set_text(self, text: str) -> None:
        self.text = text

    def set_font_size(self, font_size: int) -> None:
        self.font_size = font_size

    def set_special_character_support(self, enabled: bool) -> None:
        self.special_character_support = bool(enabled)

    def set_alignment(self, alignment: str) -> None:
        token = normalize_token(alignment)
        if token not in TEXT_ALIGNMENTS:
            log.debug("Ignoring alignment %r on Text", alignment)
            return
        self.alignment = token

    @property
    def component_size(self) -> int:
        return self._font_size

    def generate_instruction(self) -> None:
        # ^FO0,50^A0,80^FB812,1,0,C,0^FH_^FDText with euro symbol_15\&^FS
        parts = [
            f"^FO{self.x},{self.y}",
            f"^A0,{self._font_size}",
            f"^FB{self.label_width},1,0,{self.alignment},0",
        ]
        if self.special_character_support:
            parts.append("^FH_")
        parts.append(f"^FD{self._text}\\&^FS")
        self._set_instruction("".join(parts))
