"""Region entity: a rectangular hover area with idle/active colors."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

import config
from utils import Color, lerp_color

if TYPE_CHECKING:
    from canvas import Canvas


class RegionId(IntEnum):
    """Region identifiers. Values are also the scan and draw order."""
    UPPER_LEFT = 0
    UPPER_RIGHT = 1
    LOWER_LEFT = 2
    LOWER_RIGHT = 3

    @property
    def label(self) -> str:
        """CamelCase name, e.g. ``UpperLeft``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass
class Region:
    """Rectangular hit-test area in top-left-origin canvas space."""
    id: RegionId
    y_min: float
    y_max: float
    x_min: float
    x_max: float
    idle_color: Color
    active_color: Color
    # Bounds that sit on the canvas edge are inclusive so the edge pixels
    # still belong to a region.
    closed_right: bool = False
    closed_bottom: bool = False
    rate: float = config.ANIMATION_RATE
    current_color: Color = field(init=False)

    def __post_init__(self):
        self.current_color = self.idle_color

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return (self.y_min, self.y_max, self.x_min, self.x_max)

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    def contains(self, x: float, y: float) -> bool:
        """Check if point is inside the region (left/top inclusive)."""
        in_x = self.x_min <= x < self.x_max or (self.closed_right and x == self.x_max)
        in_y = self.y_min <= y < self.y_max or (self.closed_bottom and y == self.y_max)
        return in_x and in_y

    def update(self) -> None:
        """Advance the animation one frame toward the active color."""
        if self.current_color == self.active_color:
            return
        self.current_color = lerp_color(self.current_color, self.active_color, self.rate)

    def draw(self, canvas: "Canvas") -> None:
        canvas.fill_rect(self.bounds, self.current_color)

    def reset_color(self) -> None:
        self.current_color = self.idle_color

    def __str__(self) -> str:
        return self.id.label


def build_regions(width: int, height: int, colors: dict | None = None) -> list[Region]:
    """Split a width x height canvas into four quadrants, indexed by RegionId."""
    colors = colors or config.REGION_COLORS
    mid_x = width * 0.5
    mid_y = height * 0.5
    layout = {
        RegionId.UPPER_LEFT: (0, mid_y, 0, mid_x),
        RegionId.UPPER_RIGHT: (0, mid_y, mid_x, width),
        RegionId.LOWER_LEFT: (mid_y, height, 0, mid_x),
        RegionId.LOWER_RIGHT: (mid_y, height, mid_x, width),
    }
    regions = []
    for rid in RegionId:
        y_min, y_max, x_min, x_max = layout[rid]
        idle, active = colors[rid.name.lower()]
        regions.append(
            Region(
                id=rid,
                y_min=y_min,
                y_max=y_max,
                x_min=x_min,
                x_max=x_max,
                idle_color=tuple(idle),
                active_color=tuple(active),
                closed_right=x_max == width,
                closed_bottom=y_max == height,
            )
        )
    return regions
