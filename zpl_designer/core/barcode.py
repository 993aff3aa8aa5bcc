"""
Code 128 barcode component (^BC).

Instruction template: ^BY {module}^BC o,h,f,g,e,m where
  o: orientation
  h: bar height in dots
  f: print interpretation line
  g: print interpretation line above code
  e: UCC check digit
  m: mode

There is no ^FB block for barcodes, so center/right/bottom placement is
computed from an estimate of the printed length. The estimate only holds at
normal orientation.
"""
from __future__ import annotations

import logging
from typing import Optional

from .component import (
    Component,
    Orientation,
    POSITION_BOTTOM,
    POSITION_CENTER,
    POSITION_LEFT,
    POSITION_RIGHT,
    is_number,
    normalize_token,
    trunc_div,
)
from .shapes import Color, Rectangle


log = logging.getLogger(__name__)


class BarcodeTextPlacement:
    NO_TEXT = 0
    TEXT_ABOVE = 1
    # printed outside the bars; leave room with a bottom margin
    TEXT_BELOW = 2

    ALL = (NO_TEXT, TEXT_ABOVE, TEXT_BELOW)


class BarcodeMode:
    NO_MODE = "N"
    # 19 digits, subset C with FNC1
    UCC_CASE_MODE = "U"
    # printer picks subsets; 4+ digits shift to subset C
    AUTOMATIC_MODE = "A"
    # UCC/EAN with or without chained application identifiers
    NEW_MODE = "D"

    ALL = (NO_MODE, UCC_CASE_MODE, AUTOMATIC_MODE, NEW_MODE)


DEFAULT_MODULE_WIDTH = 3
DEFAULT_BAR_HEIGHT = 60

# start (11x) + check character (11x) + stop (12x), quiet zones excluded
CODE128_OVERHEAD_MODULES = 34
CODE128_MODULES_PER_SYMBOL = 11
# extra footprint when the interpretation line is printed below the bars
TEXT_BELOW_EXTRA_DOTS = 30

_INTERPRETATION_FLAGS = {
    BarcodeTextPlacement.NO_TEXT: "N,N",
    BarcodeTextPlacement.TEXT_ABOVE: "Y,Y",
    BarcodeTextPlacement.TEXT_BELOW: "Y,N",
}


def code128_length(data: str, module_width: int) -> int:
    """
    Printed length of a Code 128 symbol in dots: (34 + n * 11) * module_width.

    n is the literal character count; subset C packing is not accounted for.
    """
    return (CODE128_OVERHEAD_MODULES + len(data) * CODE128_MODULES_PER_SYMBOL) * module_width


class Barcode(Component):
    """
    Code 128 barcode. Margin-right / margin-bottom move the barcode itself,
    since it has no width field to shrink.
    """

    def __init__(
        self,
        data: str = "",
        *,
        module_width: int = DEFAULT_MODULE_WIDTH,
        bar_height: int = DEFAULT_BAR_HEIGHT,
        text_placement: int = BarcodeTextPlacement.NO_TEXT,
        check_digit: bool = False,
        mode: str = BarcodeMode.NO_MODE,
        orientation: str = Orientation.NORMAL,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.data = data or ""
        self.check_digit = bool(check_digit)
        self._module_width = DEFAULT_MODULE_WIDTH
        self._bar_height = DEFAULT_BAR_HEIGHT
        self._text_placement = BarcodeTextPlacement.NO_TEXT
        self._mode = BarcodeMode.NO_MODE
        self._orientation = Orientation.NORMAL
        self.background: Optional[Rectangle] = None

        self.module_width = module_width
        self.bar_height = bar_height
        self.text_placement = text_placement
        self.mode = mode
        self.orientation = orientation

    # ---- validated attributes ----

    @property
    def module_width(self) -> int:
        return self._module_width

    @module_width.setter
    def module_width(self, value: int) -> None:
        if is_number(value) and value >= 1:
            self._module_width = int(value)
        else:
            self._warn(f"module width must be >= 1, got {value!r}")

    @property
    def bar_height(self) -> int:
        return self._bar_height

    @bar_height.setter
    def bar_height(self, value: int) -> None:
        if is_number(value) and value >= 1:
            self._bar_height = int(value)
        else:
            self._warn(f"bar height must be >= 1, got {value!r}")

    @property
    def text_placement(self) -> int:
        return self._text_placement

    @text_placement.setter
    def text_placement(self, value: int) -> None:
        if value in BarcodeTextPlacement.ALL:
            self._text_placement = value
        else:
            self._warn(f"unknown text placement {value!r}")

    @property
    def mode(self) -> str:
        return self._mode

    @mode.setter
    def mode(self, value: str) -> None:
        token = normalize_token(value)
        if token in BarcodeMode.ALL:
            self._mode = token
        else:
            self._warn(f"unknown barcode mode {value!r}")

    @property
    def orientation(self) -> str:
        return self._orientation

    @orientation.setter
    def orientation(self, value: str) -> None:
        token = normalize_token(value)
        if token in Orientation.ALL:
            self._orientation = token
        else:
            self._warn(f"unknown orientation {value!r}")

    def set_data(self, data: str) -> None:
        self.data = data or ""

    def set_module_width(self, module_width: int) -> None:
        self.module_width = module_width

    def set_bar_height(self, bar_height: int) -> None:
        self.bar_height = bar_height

    def set_text_placement(self, text_placement: int) -> None:
        self.text_placement = text_placement

    def set_check_digit(self, enabled: bool) -> None:
        self.check_digit = bool(enabled)

    def set_mode(self, mode: str) -> None:
        self.mode = mode

    def set_orientation(self, orientation: str) -> None:
        self.orientation = orientation

    # ---- geometry ----

    @property
    def is_normal(self) -> bool:
        return self._orientation == Orientation.NORMAL

    def get_barcode_length(self) -> int:
        """Estimated printed length in dots; 0 unless orientation is normal."""
        if not self.is_normal:
            return 0
        return code128_length(self.data, self._module_width)

    @property
    def component_size(self) -> int:
        size = self._bar_height
        if self._text_placement == BarcodeTextPlacement.TEXT_BELOW:
            size += TEXT_BELOW_EXTRA_DOTS
        # TEXT_ABOVE is drawn outside the field and adds nothing
        return size

    def set_margin_right(self, margin_right: int) -> None:
        self.x -= margin_right

    def set_margin_bottom(self, margin_bottom: int) -> None:
        self.y -= margin_bottom

    def set_alignment(self, alignment: str) -> None:
        token = normalize_token(alignment)
        if token == POSITION_LEFT:
            self.x = 0
        elif token == POSITION_CENTER:
            self.x = trunc_div(self.label_width - self.get_barcode_length(), 2)
        elif token == POSITION_RIGHT:
            if not self.is_normal:
                return
            self.x = self.label_width - self.get_barcode_length()
        elif token == POSITION_BOTTOM:
            if not self.is_normal:
                return
            self.y = self.label_height - self.component_size
        else:
            log.debug("Ignoring alignment %r on Barcode", alignment)
            return
        self.alignment = token

    # ---- background ----

    def apply_background(self, color: str, padding_x: int, padding_y: int) -> Rectangle:
        """
        Put a solid rectangle behind the barcode so it masks whatever lies
        underneath (a border line, for instance).

        Call after the barcode is positioned; the rectangle is a snapshot of
        the current geometry and is replaced on every call.
        """
        padding_x = max(0, padding_x)
        padding_y = max(0, padding_y)
        if normalize_token(color) not in Color.ALL:
            color = Color.WHITE

        rect = Rectangle(label_width=self.label_width, label_height=self.label_height)
        rect.width = self.get_barcode_length() + padding_x * 2
        rect.height = self.component_size + padding_y * 2
        rect.x = self.x - padding_x
        rect.y = self.y - padding_y
        rect.color = color
        rect.fill_background()

        self.background = rect
        return rect

    def remove_background(self) -> None:
        self.background = None

    # ---- instruction ----

    def generate_instruction(self) -> None:
        parts = []
        if self.background is not None:
            self.background.generate_instruction()
            parts.append(self.background.instruction)
            parts.append("\n")
        parts.append(f"^FO{self.x},{self.y}")
        parts.append(f"^BY {self._module_width}")
        parts.append(
            f"^BC{self._orientation},{self._bar_height},"
            f"{_INTERPRETATION_FLAGS[self._text_placement]},"
            f"{'Y' if self.check_digit else 'N'},{self._mode}"
        )
        parts.append(f"^FD{self.data}^FS")
        self._set_instruction("".join(parts))
