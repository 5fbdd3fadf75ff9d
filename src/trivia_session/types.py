"""
trivia_session.types — TypedDict schemas for session snapshots
==============================================================

Documents the structure returned by build_session_snapshot(), which
report generators consume as a read-only view of a session:

    from trivia_session import build_session_snapshot
    snapshot = build_session_snapshot(controller)
    snapshot["players"][0]["score"]

Use __annotations__ to inspect fields:

    >>> PlayerSnapshot.__annotations__
    {'player_id': <class 'str'>, 'name': <class 'str'>, 'score': <class 'int'>}
"""

from typing import List, Optional, TypedDict


class PlayerSnapshot(TypedDict):
    """One player and their current score."""
    player_id: str          # e.g., "player1"
    name: str               # e.g., "Alice"
    score: int              # never negative


class QuestionSnapshot(TypedDict):
    """Answered flag of one question, keyed by its point value."""
    value: int
    answered: bool


class CategorySnapshot(TypedDict):
    """A category and the state of each of its questions.

    Fields
    ------
    name : str
        Category name as loaded.
    completed : bool
        True once every question in the category is answered.
    questions : List[QuestionSnapshot]
        Ordered by point value.
    """
    name: str
    completed: bool
    questions: List[QuestionSnapshot]


class SessionSnapshot(TypedDict):
    """Read-only view of a session.

    Fields
    ------
    session_id : str
        Case identifier, e.g., "GAME_1A2B3C4D".
    status : str
        "SETUP", "IN_PROGRESS" or "FINISHED".
    scoring_policy : str
        Display name of the active policy.
    total_turns : int
        Turns advanced so far.
    current_player : str or None
        Id of the player whose turn it is.
    players : List[PlayerSnapshot]
    categories : List[CategorySnapshot]
    event_count : int
        Records emitted for this session.
    """
    session_id: str
    status: str
    scoring_policy: str
    total_turns: int
    current_player: Optional[str]
    players: List[PlayerSnapshot]
    categories: List[CategorySnapshot]
    event_count: int
