# Area: Session
"""
trivia_session._session.enums — Session State Machine Enums
===========================================================

Defines the statuses and events of the session lifecycle.
"""

from enum import Enum


class SessionStatus(Enum):
    """
    Lifecycle status of a session.

    State transitions:
    SETUP -> IN_PROGRESS (on START)
    IN_PROGRESS -> FINISHED (on END)
    FINISHED is terminal.
    """
    SETUP = "SETUP"
    IN_PROGRESS = "IN_PROGRESS"
    FINISHED = "FINISHED"


class SessionEvent(Enum):
    """
    Events that trigger status transitions.

    Events are triggered by:
    - START: initialize() with players and a dataset
    - END: every question answered, or an explicit early end
    """
    START = "START"
    END = "END"
