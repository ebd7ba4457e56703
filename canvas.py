"""Drawing surface used by regions, backed by pyglet shapes."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import pyglet
from pyglet import shapes

from utils import Color

Bounds = tuple[float, float, float, float]  # (y_min, y_max, x_min, x_max)


@runtime_checkable
class Canvas(Protocol):
    def clear(self, color: Color) -> None: ...

    def fill_rect(self, bounds: Bounds, color: Color) -> None: ...


class PygletCanvas:
    """Canvas in top-left-origin pixel space drawn through a single batch.

    Rectangles are cached per bounds and recolored each frame rather than
    rebuilt. Call ``begin()`` before a frame's drawing and ``end()`` after it.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.batch = pyglet.graphics.Batch()
        self._bg_group = pyglet.graphics.Group(order=0)
        self._fg_group = pyglet.graphics.Group(order=1)
        self._background = shapes.Rectangle(
            0, 0, self.width, self.height, color=(0, 0, 0), batch=self.batch, group=self._bg_group
        )
        self._rects: dict[Bounds, shapes.Rectangle] = {}
        self._used: set[Bounds] = set()

    def begin(self) -> None:
        self._used.clear()

    def clear(self, color: Color) -> None:
        self._background.color = tuple(color)

    def fill_rect(self, bounds: Bounds, color: Color) -> None:
        rect = self._rects.get(bounds)
        if rect is None:
            rect = shapes.Rectangle(0, 0, 1, 1, color=tuple(color), batch=self.batch, group=self._fg_group)
            self._place(rect, bounds)
            self._rects[bounds] = rect
        rect.color = tuple(color)
        rect.visible = True
        self._used.add(bounds)

    def end(self) -> None:
        for bounds, rect in self._rects.items():
            if bounds not in self._used:
                rect.visible = False
        self.batch.draw()

    def _place(self, rect: shapes.Rectangle, bounds: Bounds) -> None:
        y_min, y_max, x_min, x_max = bounds
        # pyglet's origin is bottom-left.
        rect.x = x_min
        rect.y = self.height - y_max
        rect.width = x_max - x_min
        rect.height = y_max - y_min
