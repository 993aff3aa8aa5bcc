"""
core/templates.py - Ready-to-print label layouts.

Each template adds its components to the given label and returns the
label code. An invalid label (None, or a non-positive canvas) yields "".
"""
from __future__ import annotations

import logging
from typing import Optional

from .barcode import Barcode
from .component import POSITION_BOTTOM, POSITION_CENTER
from .label import Label
from .shapes import Color, Ellipse, Rectangle
from .text import FontStyle, Text


log = logging.getLogger(__name__)


def _check_label(label: Optional[Label]) -> bool:
    if label is None or label.get_label_width() <= 0 or label.get_label_height() <= 0:
        log.warning("Create a valid label first; returning empty label code")
        return False
    return True


def _bottom_barcode(label: Label, data: str, padding_y: int) -> Barcode:
    """Barcode centered at the bottom, 20 dots up, on a white background."""
    barcode = Barcode(data, id="barcode")
    barcode.set_label_size(label.label_width, label.label_height)
    barcode.module_width = 2
    barcode.set_alignment(POSITION_BOTTOM)
    barcode.set_alignment(POSITION_CENTER)
    barcode.set_margin_bottom(20)
    barcode.apply_background(Color.WHITE, 10, padding_y)
    return barcode


def template1(
    label: Optional[Label],
    centralized_text: bool,
    title_text: str,
    subtitle_text: str,
    barcode_text: str,
) -> str:
    """
    Title, subtitle and a barcode inside a rounded border inset by 20 dots.

    The barcode sits on a solid background that cuts the border line behind
    it. Designed for a 2 x 1 inch label at 8 dpmm.
    """
    if not _check_label(label):
        return ""
    width, height = label.label_width, label.label_height

    title = Text(title_text, id="title")
    title.set_label_size(width, height)
    title.set_margin_top(40)
    if centralized_text:
        title.set_alignment(POSITION_CENTER)
    else:
        title.set_margin_left(40)

    subtitle = Text(subtitle_text, id="subtitle")
    subtitle.set_label_size(width, height)
    subtitle.below_of(title)
    subtitle.font_size = 20
    if centralized_text:
        subtitle.set_alignment(POSITION_CENTER)
    else:
        subtitle.set_margin_left(40)

    barcode = _bottom_barcode(label, barcode_text, 10)

    border = Rectangle(id="borderBox")
    border.set_label_size(width, height)
    border.width = width
    border.height = height
    border.thickness = 2
    border.set_margins(20, 20, 20, barcode.component_size - 10)
    border.corner_radius = 1

    label.add_all_components(border, title, subtitle, barcode)
    return label.get_label_code()


def template2(
    label: Optional[Label],
    title_text: str,
    subtitle_text: str,
    info_text: str,
    barcode_text: str,
) -> str:
    """
    Large centered title over a divider with a center dot, then subtitle,
    info line and a barcode crossing a rounded border.

    Designed for a 3 x 2 inch label at 8 dpmm.
    """
    if not _check_label(label):
        return ""
    width, height = label.label_width, label.label_height

    title = Text(title_text, id="title")
    title.set_label_size(width, height)
    title.set_margin_top(50)
    title.font_size = FontStyle.XLARGE
    title.set_alignment(POSITION_CENTER)

    line = Rectangle(id="line below title")
    line.set_label_size(width, height)
    line.width = 140
    line.height = 4
    line.below_of(title)
    line.set_alignment(POSITION_CENTER)
    line.set_margin_top(24)
    line.fill_background()

    # white gap around the dot
    line_back = Rectangle(id="center dot padding")
    line_back.set_label_size(width, height)
    line_back.width = 36
    line_back.height = 8
    line_back.set_margin_top(24)
    line_back.below_of(title)
    line_back.set_alignment(POSITION_CENTER)
    line_back.color = Color.WHITE
    line_back.fill_background()

    dot = Ellipse(id="ellipse below title", label_width=width, label_height=height)
    dot.width = 18
    dot.height = 18
    dot.set_margin_top(17)
    dot.below_of(title)
    dot.set_alignment(POSITION_CENTER)
    dot.fill_background()

    subtitle = Text(subtitle_text, id="subtitle")
    subtitle.set_label_size(width, height)
    subtitle.below_of(line)
    subtitle.font_size = FontStyle.NORMAL
    subtitle.set_margin_top(40)
    subtitle.set_alignment(POSITION_CENTER)

    info = Text(info_text, id="info")
    info.set_label_size(width, height)
    info.below_of(subtitle)
    info.font_size = FontStyle.SMALL
    info.set_alignment(POSITION_CENTER)

    barcode = _bottom_barcode(label, barcode_text, 0)

    border = Rectangle(id="Border")
    border.set_label_size(width, height)
    border.width = width
    border.height = height
    border.thickness = 3
    # barcode margin + half the barcode + half the border line
    bottom = 20 + barcode.component_size // 2 + border.thickness // 2
    border.set_margins(20, 20, 20, bottom)
    border.corner_radius = 1

    label.add_all_components(border, title, line, line_back, dot, subtitle, info, barcode)
    return label.get_label_code()


TEMPLATES = {
    "template1": template1,
    "template2": template2,
}
