"""
Tests for the Code 128 barcode: length and footprint formulas, alignment,
margin overrides, background painting and the ^BC instruction.
"""
from __future__ import annotations

import logging

import pytest

from zpl_designer.core.barcode import (
    Barcode,
    BarcodeMode,
    BarcodeTextPlacement,
    code128_length,
)
from zpl_designer.core.component import Orientation
from zpl_designer.core.shapes import Color


DATA = "1234546789"


@pytest.fixture()
def barcode(label_size):
    b = Barcode(DATA, module_width=2)
    b.set_label_size(*label_size)
    return b


class TestLengthAndSize:
    def test_length_formula(self):
        assert code128_length(DATA, 2) == (34 + 10 * 11) * 2 == 288

    def test_barcode_length(self, barcode):
        assert barcode.get_barcode_length() == 288

    def test_length_is_zero_when_rotated(self, barcode):
        barcode.orientation = Orientation.ROTATED
        assert barcode.get_barcode_length() == 0

    def test_footprint_by_text_placement(self, barcode):
        assert barcode.component_size == 60
        barcode.text_placement = BarcodeTextPlacement.TEXT_ABOVE
        assert barcode.component_size == 60
        barcode.text_placement = BarcodeTextPlacement.TEXT_BELOW
        assert barcode.component_size == 90


class TestValidation:
    def test_defaults(self):
        b = Barcode()
        assert b.module_width == 3
        assert b.bar_height == 60
        assert b.mode == BarcodeMode.NO_MODE
        assert b.orientation == Orientation.NORMAL
        assert b.text_placement == BarcodeTextPlacement.NO_TEXT
        assert b.check_digit is False
        assert b.background is None

    def test_module_width_below_one_rejected(self, caplog):
        b = Barcode(DATA)
        with caplog.at_level(logging.WARNING):
            b.set_module_width(0)
        assert b.module_width == 3
        assert "module width" in caplog.text

    def test_non_numeric_sizes_rejected(self, warnings_seen):
        b = Barcode(DATA, warning_handler=warnings_seen)
        b.module_width = None
        b.bar_height = "tall"
        assert (b.module_width, b.bar_height) == (3, 60)
        assert len(warnings_seen.seen) == 2

    def test_unknown_mode_rejected(self, warnings_seen):
        b = Barcode(DATA, warning_handler=warnings_seen)
        b.set_mode("Z")
        assert b.mode == "N"
        b.set_mode("a")
        assert b.mode == BarcodeMode.AUTOMATIC_MODE
        assert len(warnings_seen.seen) == 1

    def test_unknown_orientation_and_placement_rejected(self):
        b = Barcode(DATA)
        b.set_orientation("Q")
        b.set_text_placement(7)
        b.set_bar_height(0)
        assert b.orientation == "N"
        assert b.text_placement == BarcodeTextPlacement.NO_TEXT
        assert b.bar_height == 60


class TestAlignment:
    def test_center(self, barcode):
        barcode.set_alignment("C")
        assert barcode.x == (812 - 288) // 2 == 262

    def test_right(self, barcode):
        barcode.set_alignment("R")
        assert barcode.x == 524

    def test_left(self, barcode):
        barcode.x = 100
        barcode.set_alignment("L")
        assert barcode.x == 0

    def test_bottom(self, barcode):
        barcode.set_alignment("B")
        assert barcode.y == 1218 - 60

    def test_bottom_with_text_below(self, barcode):
        barcode.text_placement = BarcodeTextPlacement.TEXT_BELOW
        barcode.set_alignment("B")
        assert barcode.y == 1218 - 90

    @pytest.mark.parametrize("orientation", [Orientation.ROTATED, Orientation.INVERTED, Orientation.BOTTOM_UP])
    def test_right_and_bottom_need_normal_orientation(self, barcode, orientation):
        barcode.orientation = orientation
        barcode.x, barcode.y = 11, 22
        barcode.set_alignment("R")
        barcode.set_alignment("B")
        assert (barcode.x, barcode.y) == (11, 22)

    def test_center_when_rotated_uses_zero_length(self, barcode):
        barcode.orientation = Orientation.ROTATED
        barcode.set_alignment("C")
        assert barcode.x == 406

    def test_unknown_alignment_is_noop(self, barcode):
        barcode.x = 5
        barcode.set_alignment("J")
        assert barcode.x == 5


class TestMargins:
    def test_margin_right_moves_x(self, barcode):
        barcode.x = 100
        barcode.set_margin_right(20)
        assert barcode.x == 80
        assert barcode.label_width == 812

    def test_margin_bottom_moves_y(self, barcode):
        barcode.y = 100
        barcode.set_margin_bottom(20)
        assert barcode.y == 80

    def test_four_value_margins(self, barcode):
        barcode.x, barcode.y = 100, 100
        barcode.set_margins(5, 6, 7, 8)
        assert (barcode.x, barcode.y) == (93, 92)

    def test_single_value_margin(self, barcode):
        barcode.set_margins(10)
        assert (barcode.x, barcode.y) == (-10, -10)


class TestBackground:
    def test_background_geometry(self, barcode):
        barcode.x, barcode.y = 262, 1138
        rect = barcode.apply_background(Color.WHITE, 10, 10)
        assert rect is barcode.background
        assert rect.width == 288 + 20
        assert rect.height == 60 + 20
        assert (rect.x, rect.y) == (252, 1128)
        assert rect.thickness == min(rect.width, rect.height) // 2 == 40
        assert rect.color == Color.WHITE
        assert (rect.label_width, rect.label_height) == (812, 1218)

    def test_negative_padding_clamped(self, barcode):
        rect = barcode.apply_background(Color.BLACK, -5, -5)
        assert rect.width == 288
        assert rect.height == 60
        assert rect.color == Color.BLACK

    def test_invalid_color_falls_back_to_white(self, barcode):
        rect = barcode.apply_background("green", 0, 0)
        assert rect.color == Color.WHITE

    def test_background_replaced_on_each_call(self, barcode):
        first = barcode.apply_background(Color.WHITE, 10, 10)
        barcode.y = 500
        second = barcode.apply_background(Color.WHITE, 10, 10)
        assert second is not first
        assert second.y == 490

    def test_background_is_a_snapshot(self, barcode):
        rect = barcode.apply_background(Color.WHITE, 10, 10)
        barcode.y = 300
        assert rect.y == -10


class TestInstruction:
    def test_default(self):
        b = Barcode("ABC")
        b.generate_instruction()
        assert b.instruction == "^FO0,0^BY 3^BCN,60,N,N,N,N^FDABC^FS"

    @pytest.mark.parametrize(
        "placement, flags",
        [
            (BarcodeTextPlacement.NO_TEXT, "N,N"),
            (BarcodeTextPlacement.TEXT_ABOVE, "Y,Y"),
            (BarcodeTextPlacement.TEXT_BELOW, "Y,N"),
        ],
    )
    def test_text_placement_flags(self, placement, flags):
        b = Barcode("ABC", text_placement=placement)
        b.generate_instruction()
        assert f"^BCN,60,{flags},N,N^FD" in b.instruction

    def test_all_parameters(self):
        b = Barcode(
            "00012345678901234567",
            x=10, y=20, module_width=2, bar_height=100,
            text_placement=BarcodeTextPlacement.TEXT_BELOW,
            check_digit=True, mode=BarcodeMode.UCC_CASE_MODE,
            orientation=Orientation.ROTATED,
        )
        b.generate_instruction()
        assert b.instruction == "^FO10,20^BY 2^BCR,100,Y,N,Y,U^FD00012345678901234567^FS"

    def test_background_precedes_barcode(self, barcode):
        barcode.set_alignment("B")
        barcode.set_alignment("C")
        barcode.set_margin_bottom(20)
        barcode.apply_background(Color.WHITE, 10, 10)
        barcode.generate_instruction()
        assert barcode.instruction == (
            "^FO252,1128^GB308,80,40,W,0^FS"
            "\n"
            "^FO262,1138^BY 2^BCN,60,N,N,N,N^FD1234546789^FS"
        )
        assert barcode.background.instruction == "^FO252,1128^GB308,80,40,W,0^FS"

    def test_remove_background(self, barcode):
        barcode.apply_background(Color.WHITE, 10, 10)
        barcode.remove_background()
        barcode.generate_instruction()
        assert "\n" not in barcode.instruction

    def test_generate_is_idempotent(self, barcode):
        barcode.apply_background(Color.WHITE, 4, 4)
        barcode.generate_instruction()
        first = barcode.instruction
        barcode.generate_instruction()
        assert barcode.instruction == first


def test_module_documents_instruction_template():
    from zpl_designer.core import barcode as barcode_module

    assert barcode_module.__doc__ is not None
    assert "^BC o,h,f,g,e,m" in barcode_module.__doc__
