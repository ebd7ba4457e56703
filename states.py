"""Region highlighter states logic."""

from fsm import State
from region import RegionId

GLOBAL_STATE_NAME = "GlobalRegionState"


def animate_state_name(region_id: RegionId) -> str:
    return f"{region_id.label}AnimateState"


class GlobalRegionState(State):
    """Runs every tick: hit-tests the mouse and switches the animate state."""

    def __init__(self):
        super().__init__(GLOBAL_STATE_NAME)

    def execute(self, app):
        mx, my = app.mouse_xy
        # Still in the same region, nothing to do.
        if app.hovered_region.contains(mx, my):
            return
        for region in app.regions:
            if region.contains(mx, my):
                app.hovered_region = region
                app.fsm.change_state(animate_state_name(region.id))
                break

    # No announcements for the global state.
    def enter(self, app):
        pass

    def exit(self, app):
        pass


class RegionAnimateState(State):
    """Animates one region toward its active color and draws the rest as-is."""

    def __init__(self, region_id: RegionId):
        super().__init__(animate_state_name(region_id))
        self.region_id = region_id

    def execute(self, app):
        for region in app.regions:
            if region.id == self.region_id:
                region.update()
            region.draw(app.canvas)

    def exit(self, app):
        app.regions[self.region_id].reset_color()
        super().exit(app)


def build_states() -> dict[str, State]:
    """Create one instance of every state, keyed by name."""
    states = [GlobalRegionState()] + [RegionAnimateState(rid) for rid in RegionId]
    return {s.name: s for s in states}
