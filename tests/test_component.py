"""
Tests for the Component base: alignment tokens, margins, below_of and raw
instructions.
"""
from __future__ import annotations

import pytest

from zpl_designer.core.component import (
    Component,
    RawInstruction,
    POSITION_BOTTOM,
    POSITION_CENTER,
    trunc_div,
)
from zpl_designer.core.shapes import Rectangle
from zpl_designer.core.text import Text


class TestTruncDiv:
    def test_positive(self):
        assert trunc_div(672, 2) == 336
        assert trunc_div(7, 2) == 3

    def test_negative_rounds_toward_zero(self):
        """-41 / 2 is -20, not -21 like floor division."""
        assert trunc_div(-41, 2) == -20
        assert trunc_div(-4, 2) == -2


class TestBaseComponent:
    def test_component_is_abstract(self):
        with pytest.raises(TypeError):
            Component()

    def test_defaults(self):
        c = RawInstruction()
        assert (c.x, c.y) == (0, 0)
        assert c.alignment == "L"
        assert c.id == ""
        assert c.instruction == ""
        assert c.component_size == 0

    def test_set_label_size(self, label_size):
        c = RawInstruction()
        c.set_label_size(*label_size)
        assert c.get_label_width() == 812
        assert c.get_label_height() == 1218

    def test_base_alignment_only_stores_token(self):
        c = RawInstruction(x=15)
        c.set_alignment("r")
        assert c.alignment == "R"
        assert c.x == 15

    def test_unknown_alignment_is_noop(self):
        c = RawInstruction()
        c.set_alignment("diagonal")
        assert c.alignment == "L"

    def test_component_size_is_settable_and_non_negative(self):
        c = RawInstruction()
        c.component_size = 25
        assert c.component_size == 25
        c.component_size = -5
        assert c.component_size == 0


class TestBaseMargins:
    """Text uses the base margin formulas unchanged."""

    def test_left_and_top_move_origin(self):
        t = Text("x")
        t.set_margin_left(12)
        t.set_margin_top(7)
        assert (t.x, t.y) == (12, 7)

    def test_right_and_bottom_shrink_canvas(self, label_size):
        t = Text("x", label_width=label_size[0], label_height=label_size[1])
        t.set_margin_right(12)
        t.set_margin_bottom(18)
        assert t.label_width == 800
        assert t.label_height == 1200
        assert (t.x, t.y) == (0, 0)

    def test_four_value_margins(self, label_size):
        t = Text("x", label_width=label_size[0], label_height=label_size[1])
        t.set_margins(1, 2, 3, 4)
        assert t.label_height == 1218 - (4 + 2)
        assert t.label_width == 812 - (3 + 1)
        assert (t.x, t.y) == (1, 2)

    def test_single_value_margin_doubles_right_and_bottom(self, label_size):
        t = Text("x", label_width=label_size[0], label_height=label_size[1])
        t.set_margins(10)
        assert (t.x, t.y) == (10, 10)
        assert t.label_width == 792
        assert t.label_height == 1198

    def test_partial_margins_rejected(self):
        t = Text("x")
        with pytest.raises(TypeError):
            t.set_margins(1, 2)


class TestBelowOf:
    def test_below_of_adds_other_y_and_size(self):
        title = Text("Title", font_size=70)
        title.set_margin_top(50)
        line = Rectangle(width=140, height=4)
        line.below_of(title)
        assert line.y == 120

    def test_below_of_keeps_own_offset(self):
        title = Text("Title")
        title.y = 40
        sub = Text("Sub")
        sub.set_margin_top(5)
        sub.below_of(title)
        assert sub.y == 5 + 40 + 30

    def test_below_of_is_one_shot(self):
        title = Text("Title")
        sub = Text("Sub")
        sub.below_of(title)
        title.y = 500
        assert sub.y == 30

    def test_below_of_none_is_ignored(self):
        sub = Text("Sub")
        sub.below_of(None)
        assert sub.y == 0


class TestRawInstruction:
    def test_verbatim_instruction(self):
        raw = RawInstruction("^FO10,10^GFA,1,1,1,FF^FS", id="logo")
        raw.generate_instruction()
        assert raw.instruction == "^FO10,10^GFA,1,1,1,FF^FS"
        assert str(raw) == raw.get_instruction()

    def test_set_instruction(self):
        raw = RawInstruction()
        raw.set_instruction("^PQ2")
        assert str(raw) == "^PQ2"

    def test_bottom_token_stored_on_base(self):
        raw = RawInstruction()
        raw.set_alignment(POSITION_BOTTOM)
        assert raw.alignment == "B"
        raw.set_alignment(POSITION_CENTER)
        assert raw.alignment == "C"
