"""Compile label components (text, Code 128 barcodes, boxes, ellipses,
diagonal lines) into ZPL and send the result to a Zebra-compatible printer."""

__version__ = "1.0.0"
