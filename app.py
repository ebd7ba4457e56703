"""Application context shared by every state.

The app has no logic of its own to control the visuals, only setup. All of
the per-frame behaviour lives in the states.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import config
from fsm import StateMachine
from region import Region, RegionId, build_regions
from states import GLOBAL_STATE_NAME, animate_state_name, build_states

if TYPE_CHECKING:
    from canvas import Canvas


LOG = logging.getLogger(__name__)


class RegionApp:
    """Owns the regions, the hovered region and the state machine."""

    def __init__(self, canvas: "Canvas", width: int = config.SCREEN_W, height: int = config.SCREEN_H) -> None:
        self.canvas = canvas
        self.width = int(width)
        self.height = int(height)
        self.mouse_xy: tuple[int, int] = (0, 0)
        self.regions: list[Region] = []
        self.hovered_region: Region | None = None
        self.fsm: StateMachine | None = None

    def setup(self) -> None:
        """Build regions, states and the state machine. Called once."""
        self.regions = build_regions(self.width, self.height)
        self.hovered_region = self.regions[RegionId.UPPER_LEFT]

        self.fsm = StateMachine(self)
        for state in build_states().values():
            self.fsm.add_state(state)
        self.fsm.set_global_state(self.fsm.get_state(GLOBAL_STATE_NAME))
        self.fsm.set_current_state(self.fsm.get_state(animate_state_name(RegionId.UPPER_LEFT)))
        LOG.debug("setup %dx%d canvas with %d regions", self.width, self.height, len(self.regions))

    def set_mouse(self, x: float, y: float) -> None:
        """Record the mouse position in top-left-origin canvas pixels."""
        self.mouse_xy = (int(x), int(y))

    def tick(self) -> None:
        """One frame: clear the canvas and let the state machine run."""
        if self.fsm is None:
            raise RuntimeError("RegionApp.tick() called before setup()")
        self.canvas.clear(config.BACKGROUND)
        self.fsm.update()
