"""
Gate - Secret-based visibility gate for the graduate list.

The secret is a shared client-side constant. This is a UX gate, not an
access-control boundary: the store stays unauthenticated whatever the
gate says.
"""

import logging
from enum import Enum

from ..core.exceptions import GateTransitionError
from ..core.ports.config_provider import DEFAULT_SECRET


class GateState(Enum):
    """States of the gate."""

    LOCKED = "locked"
    UNLOCKING = "unlocking"
    UNLOCKED_HIDDEN = "unlocked_hidden"
    UNLOCKED_VISIBLE = "unlocked_visible"

    @property
    def is_unlocked(self) -> bool:
        return self in (GateState.UNLOCKED_HIDDEN, GateState.UNLOCKED_VISIBLE)

    @property
    def is_visible(self) -> bool:
        return self is GateState.UNLOCKED_VISIBLE


class GateMachine:
    """
    State machine for the gate.

    Transitions:
        LOCKED           --open-->             UNLOCKING
        UNLOCKING        --correct secret-->   UNLOCKED_VISIBLE
        UNLOCKING        --incorrect secret--> UNLOCKING
        UNLOCKING        --cancel-->           LOCKED
        UNLOCKED_VISIBLE <--toggle-->          UNLOCKED_HIDDEN

    There is no terminal state; a new session starts LOCKED.
    """

    def __init__(self, secret: str = DEFAULT_SECRET):
        """
        Initialize the gate.

        Args:
            secret: The value that unlocks the gate
        """
        self._secret = secret
        self._state = GateState.LOCKED
        self.failed_attempts = 0
        self.logger = logging.getLogger("GateMachine")

    @property
    def state(self) -> GateState:
        return self._state

    @property
    def is_unlocked(self) -> bool:
        return self._state.is_unlocked

    @property
    def is_visible(self) -> bool:
        return self._state.is_visible

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def open(self) -> GateState:
        """
        Open the prompt, or toggle the list once unlocked.

        Opening while the prompt is already open is a no-op.
        """
        if self._state is GateState.LOCKED:
            self._move(GateState.UNLOCKING)
        elif self._state.is_unlocked:
            self.toggle()
        return self._state

    def submit(self, secret: str) -> bool:
        """
        Check a secret.

        Returns:
            True if the gate unlocked

        Raises:
            GateTransitionError: If the prompt is not open
        """
        if self._state is not GateState.UNLOCKING:
            raise GateTransitionError(f"Cannot submit a secret while {self._state.value}")

        if secret == self._secret:
            self.failed_attempts = 0
            self._move(GateState.UNLOCKED_VISIBLE)
            return True

        self.failed_attempts += 1
        self.logger.info(f"Incorrect secret (attempt {self.failed_attempts})")
        return False

    def cancel(self) -> GateState:
        """Close the prompt without unlocking."""
        if self._state is not GateState.UNLOCKING:
            raise GateTransitionError(f"Cannot cancel while {self._state.value}")
        self._move(GateState.LOCKED)
        return self._state

    def toggle(self) -> GateState:
        """Flip list visibility. Pure visibility: no network calls."""
        if self._state is GateState.UNLOCKED_VISIBLE:
            self._move(GateState.UNLOCKED_HIDDEN)
        elif self._state is GateState.UNLOCKED_HIDDEN:
            self._move(GateState.UNLOCKED_VISIBLE)
        else:
            raise GateTransitionError(f"Cannot toggle visibility while {self._state.value}")
        return self._state

    def _move(self, new_state: GateState) -> None:
        old_state = self._state
        self._state = new_state
        self.logger.debug(f"Gate {old_state.value} -> {new_state.value}")
