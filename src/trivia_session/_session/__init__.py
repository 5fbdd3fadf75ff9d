# Area: Session
"""
Session core: lifecycle, turns, scoring and the controller.

This package handles:
- The SETUP → IN_PROGRESS → FINISHED state machine
- Turn rotation over players
- Pluggable scoring policies
- Winner determination and session results
- The SessionController that ties them together
"""

from .enums import SessionStatus, SessionEvent
from .state_machine import SessionStateMachine
from .turn_tracker import TurnTracker
from .scoring import (
    ScoringPolicy,
    StandardScoringPolicy,
    NoPenaltyScoringPolicy,
    ScoreKeeper,
    SCORING_POLICIES,
    get_scoring_policy,
)
from .ids import SessionIdGenerator, SequentialIdGenerator
from .state import GameSession
from .result import (
    PlayerStanding,
    SessionResult,
    determine_winners,
    format_game_result,
)
from .controller import SessionController

__all__ = [
    "SessionStatus",
    "SessionEvent",
    "SessionStateMachine",
    "TurnTracker",
    "ScoringPolicy",
    "StandardScoringPolicy",
    "NoPenaltyScoringPolicy",
    "ScoreKeeper",
    "SCORING_POLICIES",
    "get_scoring_policy",
    "SessionIdGenerator",
    "SequentialIdGenerator",
    "GameSession",
    "PlayerStanding",
    "SessionResult",
    "determine_winners",
    "format_game_result",
    "SessionController",
]
