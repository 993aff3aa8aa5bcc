"""
core/shapes.py - Closed-figure components: Rectangle (^GB), Ellipse (^GE)
and DiagonalLine (^GD).

Shapes have no ^FB block to lean on, so every horizontal alignment is
resolved here into an absolute x. All alignment math assumes normal
orientation.
"""
from __future__ import annotations

import logging

from .component import (
    Component,
    POSITION_BOTTOM,
    POSITION_CENTER,
    POSITION_LEFT,
    POSITION_RIGHT,
    is_number,
    normalize_token,
    trunc_div,
)


log = logging.getLogger(__name__)


class Color:
    BLACK = "B"
    WHITE = "W"

    ALL = (BLACK, WHITE)


MIN_CORNER_RADIUS = 0
MAX_CORNER_RADIUS = 8


class Shape(Component):
    """
    Common state for shapes: width, height, thickness and line color.

    Margin-right / margin-bottom shrink the shape itself instead of the
    canvas it sees. Abstract: use Rectangle, Ellipse or DiagonalLine.
    """

    def __init__(
        self,
        *,
        width: int = 0,
        height: int = 0,
        thickness: int = 1,
        color: str = Color.BLACK,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._width = 0
        self._height = 0
        self._thickness = 1
        self._color = Color.BLACK
        self.width = width
        self.height = height
        self.thickness = thickness
        self.color = color

    # ---- validated attributes ----

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        if not is_number(value):
            self._warn(f"width must be a number of dots, got {value!r}")
        elif value >= 0:
            self._width = int(value)

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        if not is_number(value):
            self._warn(f"height must be a number of dots, got {value!r}")
        elif value >= 0:
            self._height = int(value)

    @property
    def thickness(self) -> int:
        return self._thickness

    @thickness.setter
    def thickness(self, value: int) -> None:
        if not is_number(value):
            self._warn(f"thickness must be a number of dots, got {value!r}")
        elif value > 0:
            self._thickness = int(value)
        elif value == 0:
            self._thickness = 1

    @property
    def color(self) -> str:
        return self._color

    @color.setter
    def color(self, value: str) -> None:
        token = normalize_token(value)
        if token in Color.ALL:
            self._color = token
        else:
            self._warn(f"invalid color {value!r}; use Color.BLACK or Color.WHITE")

    # Java-style setters kept for callers composing labels imperatively
    def set_width(self, width: int) -> None:
        self.width = width

    def set_height(self, height: int) -> None:
        self.height = height

    def set_thickness(self, thickness: int) -> None:
        self.thickness = thickness

    def set_color(self, color: str) -> None:
        self.color = color

    def fill_background(self) -> None:
        """
        Paint the shape solid by growing the border to half the shorter side.

        Changing thickness afterwards brings the outline back.
        """
        if self._width < self._height:
            self.thickness = self._width // 2
        else:
            self.thickness = self._height // 2

    # ---- margins ----

    def set_margin_right(self, margin_right: int) -> None:
        self._width -= margin_right

    def set_margin_bottom(self, margin_bottom: int) -> None:
        self._height -= margin_bottom

    # ---- alignment ----

    def set_alignment(self, alignment: str) -> None:
        token = normalize_token(alignment)
        if token == POSITION_LEFT:
            self.x = 0
        elif token == POSITION_CENTER:
            self.x = trunc_div(self.label_width - self._width, 2)
        elif token == POSITION_RIGHT:
            self.x = self.label_width - self._width
        elif token == POSITION_BOTTOM:
            self.y = self.label_height
            self.y -= self._height
        else:
            log.debug("Ignoring alignment %r on %s", alignment, type(self).__name__)
            return
        self.alignment = token

    @property
    def component_size(self) -> int:
        return self._height + self._thickness

    def _field_origin(self) -> str:
        return f"^FO{self.x},{self.y}"

    def _shape_params(self) -> str:
        return f"{self._width},{self._height},{self._thickness},{self._color}"


class Rectangle(Shape):
    """Graphic box: ^FO{x},{y}^GB{w},{h},{t},{c},{r}^FS"""

    def __init__(self, *, corner_radius: int = 0, **kwargs):
        super().__init__(**kwargs)
        self._corner_radius = 0
        self.corner_radius = corner_radius

    @property
    def corner_radius(self) -> int:
        return self._corner_radius

    @corner_radius.setter
    def corner_radius(self, value: int) -> None:
        if is_number(value) and MIN_CORNER_RADIUS <= value <= MAX_CORNER_RADIUS:
            self._corner_radius = int(value)
        else:
            self._warn(
                f"corner radius {value!r} out of range "
                f"[{MIN_CORNER_RADIUS}, {MAX_CORNER_RADIUS}]"
            )

    def set_corner_radius(self, corner_radius: int) -> None:
        self.corner_radius = corner_radius

    def generate_instruction(self) -> None:
        # ^FO0,0^GB812,1218,3,B,1^FS
        self._set_instruction(
            f"{self._field_origin()}^GB{self._shape_params()},{self._corner_radius}^FS"
        )


class Ellipse(Shape):
    """
    Graphic ellipse: ^FO{x},{y}^GE{w},{h},{t},{c}^FS

    Equal width and height give a circle. Unlike the other shapes an ellipse
    keeps its size under margins and moves instead.
    """

    def set_margin_right(self, margin_right: int) -> None:
        self.x -= margin_right

    def set_margin_bottom(self, margin_bottom: int) -> None:
        self.y -= margin_bottom

    def _apply_single_margin(self, margin: int) -> None:
        # same value on every side, not doubled
        self.set_margins(margin, margin, margin, margin)

    def generate_instruction(self) -> None:
        self._set_instruction(f"{self._field_origin()}^GE{self._shape_params()}^FS")


class DiagonalLineOrientation:
    RIGHT = "R"                 # leaning right: /
    LEFT = "L"                  # leaning left: \

    ALL = (RIGHT, LEFT)


class DiagonalLine(Shape):
    """Graphic diagonal line: ^FO{x},{y}^GD{w},{h},{t},{c},{o}^FS"""

    def __init__(self, *, orientation: str = DiagonalLineOrientation.RIGHT, **kwargs):
        super().__init__(**kwargs)
        self._orientation = DiagonalLineOrientation.RIGHT
        self.orientation = orientation

    @property
    def orientation(self) -> str:
        return self._orientation

    @orientation.setter
    def orientation(self, value: str) -> None:
        token = normalize_token(value)
        if token in DiagonalLineOrientation.ALL:
            self._orientation = token

    def set_orientation(self, orientation: str) -> None:
        self.orientation = orientation

    def generate_instruction(self) -> None:
        self._set_instruction(
            f"{self._field_origin()}^GD{self._shape_params()},{self._orientation}^FS"
        )
