"""
core/component.py - Base class for everything that can be placed on a label.

A component owns its position (x, y), the canvas size it was given and a
generated ZPL instruction. Placement intents (alignment, margins, below_of)
are resolved eagerly into absolute coordinates; the instruction is only
rebuilt when generate_instruction() is called.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional


log = logging.getLogger(__name__)


# ---------- Alignment tokens ----------

POSITION_LEFT = "L"
POSITION_RIGHT = "R"
POSITION_CENTER = "C"
POSITION_JUSTIFIED = "J"
POSITION_BOTTOM = "B"           # beta

ALIGNMENTS = (POSITION_LEFT, POSITION_RIGHT, POSITION_CENTER, POSITION_JUSTIFIED, POSITION_BOTTOM)


class Orientation:
    """Field orientation tokens."""
    NORMAL = "N"
    ROTATED = "R"               # 90 degrees clockwise
    INVERTED = "I"              # 180 degrees
    BOTTOM_UP = "B"             # 270 degrees

    ALL = (NORMAL, ROTATED, INVERTED, BOTTOM_UP)


WarningHandler = Callable[["Component", str], None]


def trunc_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero (not floor)."""
    q = abs(value) // abs(divisor)
    return q if (value >= 0) == (divisor > 0) else -q


def is_number(value) -> bool:
    """True for int/float values usable as a dot count (bools excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def normalize_token(value) -> str:
    if value is None:
        return ""
    return str(value).strip().upper()


class Component(ABC):
    """
    Parent of every label component.

    Subclasses must implement generate_instruction() and usually override
    component_size. Margin-right / margin-bottom mean "shrink the canvas this
    component sees" here; Shape and Barcode redefine them.
    """

    def __init__(
        self,
        *,
        x: int = 0,
        y: int = 0,
        label_width: int = 0,
        label_height: int = 0,
        id: str = "",
        warning_handler: Optional[WarningHandler] = None,
    ):
        self.id = id
        self.x = int(x)
        self.y = int(y)
        self.label_width = int(label_width)
        self.label_height = int(label_height)
        self.alignment = POSITION_LEFT
        self.warning_handler = warning_handler
        self._component_size = 0
        self._instruction = ""

    # ---- diagnostics ----

    def _warn(self, message: str) -> None:
        log.warning("%s%s: %s", type(self).__name__, f"[{self.id}]" if self.id else "", message)
        if self.warning_handler is not None:
            self.warning_handler(self, message)

    # ---- canvas ----

    def set_label_size(self, label_width: int, label_height: int) -> None:
        """Confirm the canvas size used by the alignment and margin formulas."""
        self.label_width = int(label_width)
        self.label_height = int(label_height)

    def get_label_width(self) -> int:
        return self.label_width

    def get_label_height(self) -> int:
        return self.label_height

    # ---- alignment ----

    def set_alignment(self, alignment: str) -> None:
        token = normalize_token(alignment)
        if token not in ALIGNMENTS:
            log.debug("Ignoring unknown alignment %r on %s", alignment, type(self).__name__)
            return
        self.alignment = token

    # ---- margins ----

    def set_margin_left(self, margin_left: int) -> None:
        self.x += margin_left

    def set_margin_top(self, margin_top: int) -> None:
        self.y += margin_top

    def set_margin_right(self, margin_right: int) -> None:
        # narrows the canvas visible to this component
        self.label_width -= margin_right

    def set_margin_bottom(self, margin_bottom: int) -> None:
        self.label_height -= margin_bottom

    def set_margins(
        self,
        left: int,
        top: Optional[int] = None,
        right: Optional[int] = None,
        bottom: Optional[int] = None,
    ) -> None:
        """
        set_margins(margin) or set_margins(left, top, right, bottom).

        The four-value form applies bottom+top, then right+left, then left,
        then top. Each step mutates state read by the next, so the order
        matters. The one-value form doubles right and bottom.
        """
        if top is None and right is None and bottom is None:
            self._apply_single_margin(left)
            return
        if top is None or right is None or bottom is None:
            raise TypeError("set_margins() takes either 1 or 4 values")
        self.set_margin_bottom(bottom + top)
        self.set_margin_right(right + left)
        self.set_margin_left(left)
        self.set_margin_top(top)

    def _apply_single_margin(self, margin: int) -> None:
        self.set_margin_left(margin)
        self.set_margin_top(margin)
        self.set_margin_right(margin * 2)
        self.set_margin_bottom(margin * 2)

    # ---- stacking ----

    def below_of(self, other: Optional["Component"]) -> None:
        """
        Move this component below *other*: y += other.y + other.component_size.

        One-shot: moving *other* afterwards does not move this component.
        """
        if other is None:
            return
        self.y += other.y + other.component_size

    @property
    def component_size(self) -> int:
        return self._component_size

    @component_size.setter
    def component_size(self, value: int) -> None:
        self._component_size = max(0, int(value))

    # ---- instruction ----

    @abstractmethod
    def generate_instruction(self) -> None:
        """Rebuild self.instruction from the current state."""

    @property
    def instruction(self) -> str:
        return self._instruction

    def get_instruction(self) -> str:
        return self._instruction

    def _set_instruction(self, instruction: str) -> None:
        self._instruction = instruction

    def __str__(self) -> str:
        return self._instruction

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, x={self.x}, y={self.y})"


class RawInstruction(Component):
    """
    A component carrying a ready-made ZPL instruction.

    Useful for commands the library does not model; the instruction is
    emitted verbatim and never regenerated.
    """

    def __init__(self, instruction: str = "", **kwargs):
        super().__init__(**kwargs)
        if instruction:
            self._set_instruction(instruction)

    def set_instruction(self, instruction: str) -> None:
        self._set_instruction(instruction or "")

    def generate_instruction(self) -> None:
        pass
