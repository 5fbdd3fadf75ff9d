"""
trivia_session — Turn-based trivia sessions with an audit trail
===============================================================

Quick Start:
    from trivia_session import SessionController, CsvEventSink, load_dataset

    controller = SessionController(sink=CsvEventSink("game_event_log.csv"))
    controller.initialize(["Alice", "Bob"], load_dataset("questions.json"))
    controller.answer_question("Science", 100, "A")
    controller.advance_turn()
    ...
    controller.close()

Custom scoring:
    from trivia_session import ScoringPolicy
    class DoublePoints(ScoringPolicy):
        name = "Double Points"
        def calculate_score(self, value, correct):
            return 2 * value if correct else -value
    controller.set_scoring_policy(DoublePoints())

Command line:
    python -m trivia_session --questions questions.json --players Alice Bob
"""

from ._data import (
    OPTION_LABELS,
    Player,
    Question,
    Category,
    Dataset,
    load_dataset,
)
from ._events import (
    SYSTEM_ACTOR,
    NOT_APPLICABLE,
    Activity,
    Outcome,
    EventRecord,
    EventRecordBuilder,
    EventSink,
    NullEventSink,
    InMemoryEventSink,
    CsvEventSink,
    ConsoleEventSink,
)
from ._session import (
    SessionStatus,
    TurnTracker,
    ScoringPolicy,
    StandardScoringPolicy,
    NoPenaltyScoringPolicy,
    get_scoring_policy,
    SessionIdGenerator,
    SequentialIdGenerator,
    PlayerStanding,
    SessionResult,
    SessionController,
)
from ._reports import (
    build_session_snapshot,
    build_summary_text,
    write_summary_report,
)
from .errors import (
    TriviaSessionError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
    DatasetLoadError,
)

__all__ = [
    # Data
    "OPTION_LABELS",
    "Player",
    "Question",
    "Category",
    "Dataset",
    "load_dataset",
    # Events
    "SYSTEM_ACTOR",
    "NOT_APPLICABLE",
    "Activity",
    "Outcome",
    "EventRecord",
    "EventRecordBuilder",
    "EventSink",
    "NullEventSink",
    "InMemoryEventSink",
    "CsvEventSink",
    "ConsoleEventSink",
    # Session
    "SessionStatus",
    "TurnTracker",
    "ScoringPolicy",
    "StandardScoringPolicy",
    "NoPenaltyScoringPolicy",
    "get_scoring_policy",
    "SessionIdGenerator",
    "SequentialIdGenerator",
    "PlayerStanding",
    "SessionResult",
    "SessionController",
    # Reports
    "build_session_snapshot",
    "build_summary_text",
    "write_summary_report",
    # Errors
    "TriviaSessionError",
    "InvalidArgumentError",
    "InvalidStateError",
    "NotFoundError",
    "DatasetLoadError",
]
__version__ = "1.0.0"
