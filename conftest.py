"""Shared pytest fixtures: a canvas that records calls instead of drawing."""

import pytest

from app import RegionApp


class RecordingCanvas:
    """Canvas stand-in that keeps every call for inspection."""

    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", tuple(color)))

    def fill_rect(self, bounds, color):
        self.calls.append(("fill_rect", tuple(bounds), tuple(color)))

    def fills(self):
        return [c for c in self.calls if c[0] == "fill_rect"]

    def reset(self):
        self.calls.clear()


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def app(canvas):
    a = RegionApp(canvas, 800, 400)
    a.setup()
    return a
