"""Shared fixtures for the layout and printing tests."""
from __future__ import annotations

import pytest

from zpl_designer.core.label import Label


# 4 x 6 inch label at 8 dpmm
LABEL_W = 812
LABEL_H = 1218


@pytest.fixture()
def label_size():
    return LABEL_W, LABEL_H


@pytest.fixture()
def default_label():
    """Default 4x6in label at 203 dpi (812 x 1218 dots)."""
    return Label()


@pytest.fixture()
def warnings_seen():
    """A warning_handler that records messages."""
    seen = []

    def handler(component, message):
        seen.append((component, message))

    handler.seen = seen
    return handler
