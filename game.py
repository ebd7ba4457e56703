# Pyglet region highlighter demo
# Controls: move the mouse over a quadrant to animate it, ESC quits.
# Install: py -m pip install pyglet

import logging

import pyglet

pyglet.options["shadow_window"] = False

import config
from config import SCREEN_W, SCREEN_H, FPS
from app import RegionApp
from canvas import PygletCanvas
from utils import flip_y

LOG = logging.getLogger(__name__)


# ============================
# Main Window Class
# ============================
class RegionWindow(pyglet.window.Window):
    """Hosts a RegionApp: feeds it mouse input and one tick per frame."""

    def __init__(self):
        super().__init__(width=SCREEN_W, height=SCREEN_H, caption=config.CAPTION, resizable=False, vsync=True)
        self.canvas = PygletCanvas(self.width, self.height)
        self.app = RegionApp(self.canvas, self.width, self.height)
        self.app.setup()

        # Keep frames coming while the mouse is still so animation continues.
        pyglet.clock.schedule_interval(self.update, 1.0 / FPS)

    def update(self, dt: float):
        pass

    def _set_mouse(self, x, y):
        self.app.set_mouse(x, flip_y(y, self.height))

    def on_mouse_motion(self, x, y, dx, dy):
        self._set_mouse(x, y)

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        self._set_mouse(x, y)

    def on_key_press(self, symbol, modifiers):
        if symbol == pyglet.window.key.ESCAPE:
            self.close()
            return pyglet.event.EVENT_HANDLED

    def on_close(self):
        pyglet.clock.unschedule(self.update)
        super().on_close()

    def on_draw(self):
        """Render one frame."""
        self.clear()
        self.canvas.begin()
        self.app.tick()
        self.canvas.end()


def main():
    """Start the demo."""
    try:
        _ = RegionWindow()
        pyglet.app.run()
    except KeyboardInterrupt:
        pass
    except Exception:
        LOG.exception("Fatal error")
        raise
