"""Utility functions and color helpers."""

Color = tuple[int, int, int]


def approach(current: int, target: int, rate: float) -> int:
    """Move one channel toward ``target`` by a fraction of the gap.

    Always moves at least one unit and never past the target, so repeated
    calls reach ``target`` exactly and then stay there.
    """
    delta = target - current
    if delta == 0:
        return current
    step = int(delta * rate)
    if step == 0:
        step = 1 if delta > 0 else -1
    if abs(step) > abs(delta):
        step = delta
    return current + step


def lerp_color(current: Color, target: Color, rate: float) -> Color:
    """One animation step from ``current`` toward ``target``."""
    r = max(0.0, min(1.0, float(rate)))
    return (
        approach(current[0], target[0], r),
        approach(current[1], target[1], r),
        approach(current[2], target[2], r),
    )


def flip_y(y: float, height: int) -> int:
    """Convert between bottom-left (pyglet) and top-left (canvas) origins."""
    return int(height) - 1 - int(y)
