"""
A simple finite state machine (FSM) implementation.
"""

import logging

LOG = logging.getLogger(__name__)


class State:
    """Base class for a state in the FSM.

    States hold no per-instance data beyond their name; everything they act
    on is reached through the owner passed to each callback.
    """
    def __init__(self, name: str):
        self.name = name

    def enter(self, app):
        """Code to execute when entering this state."""
        LOG.info("entering state %s", self.name)

    def exit(self, app):
        """Code to execute when exiting this state."""
        LOG.info("exiting state %s", self.name)

    def execute(self, app):
        """Per-tick behaviour while this state is active."""
        raise NotImplementedError

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"<{type(self).__name__} {self.name}>"


class StateMachine:
    """A finite state machine with current, previous and global slots."""
    def __init__(self, owner):
        self.owner = owner
        self.current_state = None
        self.previous_state = None
        self.global_state = None
        self._states = {}

    def add_state(self, state: State):
        """Adds a state to the machine."""
        self._states[state.name] = state

    def get_state(self, state_name: str) -> State:
        state = self._states.get(state_name)
        if state is None:
            raise ValueError(f"State '{state_name}' not found.")
        return state

    # Initialisation only; no enter/exit callbacks run.
    def set_current_state(self, state: State):
        self.current_state = state

    def set_previous_state(self, state: State):
        self.previous_state = state

    def set_global_state(self, state: State):
        self.global_state = state

    def update(self):
        if self.global_state:
            self.global_state.execute(self.owner)
        # Re-read current: the global state may have just changed it.
        if self.current_state:
            self.current_state.execute(self.owner)

    def change_state(self, new_state):
        """Exit the current state, then enter ``new_state``."""
        if isinstance(new_state, str):
            new_state = self.get_state(new_state)
        if new_state is None:
            raise ValueError("trying to assign null state to current")

        LOG.debug("transition %s -> %s", self.current_state, new_state)
        self.previous_state = self.current_state
        if self.current_state:
            self.current_state.exit(self.owner)
        self.current_state = new_state
        self.current_state.enter(self.owner)

    def revert_to_previous_state(self):
        if self.previous_state is None:
            raise ValueError("no previous state to revert to")
        self.change_state(self.previous_state)

    def is_in_state(self, state: State) -> bool:
        """Compare by variant name, not object identity."""
        if self.current_state is None or state is None:
            return False
        return self.current_state.name == state.name
