# Area: Session
"""
trivia_session._session.state_machine — Session State Machine
=============================================================

Tracks a session's lifecycle status. Transitions never skip a status
and never go backwards.
"""

import logging
from typing import Optional

from ..errors import InvalidStateError
from .enums import SessionStatus, SessionEvent

logger = logging.getLogger("trivia_session.session.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    SessionStatus.SETUP: {
        SessionEvent.START: SessionStatus.IN_PROGRESS,
    },
    SessionStatus.IN_PROGRESS: {
        SessionEvent.END: SessionStatus.FINISHED,
    },
    SessionStatus.FINISHED: {},
}


class SessionStateMachine:
    """
    State machine for one session's lifecycle.

    Attributes:
        current_state: The current status
        label: Identifier used in log lines (usually the session id)
    """

    def __init__(self, label: Optional[str] = None):
        """Initialize state machine in SETUP."""
        self.current_state = SessionStatus.SETUP
        self.label = label or "session"

    def can_transition(self, event: SessionEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        valid_transitions = TRANSITIONS.get(self.current_state, {})
        return event in valid_transitions

    def transition(self, event: SessionEvent) -> SessionStatus:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            InvalidStateError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise InvalidStateError(
                f"Invalid transition: {event.value} from {self.current_state.value}"
            )

        next_state = TRANSITIONS[self.current_state][event]
        logger.info(
            f"[{self.label}] Status: {self.current_state.value} → {next_state.value}"
        )
        self.current_state = next_state
        return next_state

    def require(self, status: SessionStatus, action: str) -> None:
        """Raise InvalidStateError unless the machine is in `status`."""
        if self.current_state != status:
            raise InvalidStateError(
                f"Cannot {action}: session is {self.current_state.value}, "
                f"expected {status.value}"
            )

    @property
    def is_terminal(self) -> bool:
        return not TRANSITIONS.get(self.current_state)
