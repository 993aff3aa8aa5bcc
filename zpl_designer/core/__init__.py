from .component import (
    Component,
    RawInstruction,
    Orientation,
    POSITION_LEFT,
    POSITION_RIGHT,
    POSITION_CENTER,
    POSITION_JUSTIFIED,
    POSITION_BOTTOM,
)
from .shapes import Shape, Rectangle, Ellipse, DiagonalLine, DiagonalLineOrientation, Color
from .text import Text, FontStyle
from .barcode import Barcode, BarcodeMode, BarcodeTextPlacement, code128_length
from .label import Label, LabelSize
from .templates import template1, template2, TEMPLATES
