# Area: Events
"""
trivia_session._events.record — Event records
=============================================

An EventRecord is one immutable fact in the session's audit trail.
Records are assembled with EventRecordBuilder; only the session id and
the activity are required.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union

from ..errors import InvalidArgumentError

SYSTEM_ACTOR = "System"


class Activity(Enum):
    """Closed vocabulary of recorded activities."""
    START_SESSION = "Start Session"
    LOAD_FILE = "Load File"
    SELECT_PLAYER_COUNT = "Select Player Count"
    ENTER_PLAYER_NAME = "Enter Player Name"
    SELECT_CATEGORY = "Select Category"
    SELECT_QUESTION = "Select Question"
    ANSWER_QUESTION = "Answer Question"
    CHANGE_SCORING_POLICY = "Change Scoring Policy"
    GENERATE_REPORT = "Generate Report"
    GENERATE_EVENT_LOG = "Generate Event Log"
    END_SESSION = "End Session"
    EXIT_SESSION = "Exit Session"


class Outcome(Enum):
    """Common outcome values carried by records."""
    CORRECT = "Correct"
    INCORRECT = "Incorrect"
    SUCCESS = "Success"
    COMPLETED = "Completed"
    ENDED_EARLY = "Ended Early"
    NOT_APPLICABLE = "N/A"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class EventRecord:
    """One occurrence in a session, in emission order."""
    session_id: str
    activity: str
    timestamp: datetime
    actor: str = SYSTEM_ACTOR
    category: Optional[str] = None
    value: Optional[int] = None
    answer: Optional[str] = None
    outcome: Optional[str] = None
    score_after: Optional[int] = None
    question_text: Optional[str] = None

    @property
    def is_system(self) -> bool:
        return self.actor == SYSTEM_ACTOR


class EventRecordBuilder:
    """
    Fluent constructor for EventRecord.

    Example:
        record = (EventRecordBuilder("GAME_1A2B3C4D", Activity.ANSWER_QUESTION)
                  .actor("player1")
                  .category("Science")
                  .value(100)
                  .outcome(Outcome.CORRECT)
                  .build())
    """

    def __init__(self, session_id: str, activity: Union[Activity, str]):
        if not session_id or not str(session_id).strip():
            raise InvalidArgumentError("Event session id is required")
        activity_name = activity.value if isinstance(activity, Activity) else activity
        if not activity_name or not str(activity_name).strip():
            raise InvalidArgumentError("Event activity is required")
        self._session_id = session_id
        self._activity = activity_name
        self._timestamp: Optional[datetime] = None
        self._actor = SYSTEM_ACTOR
        self._category: Optional[str] = None
        self._value: Optional[int] = None
        self._answer: Optional[str] = None
        self._outcome: Optional[str] = None
        self._score_after: Optional[int] = None
        self._question_text: Optional[str] = None

    def actor(self, actor: Optional[str]) -> "EventRecordBuilder":
        self._actor = actor or SYSTEM_ACTOR
        return self

    def category(self, category: Optional[str]) -> "EventRecordBuilder":
        self._category = category
        return self

    def value(self, value: Optional[int]) -> "EventRecordBuilder":
        self._value = value
        return self

    def answer(self, answer: Optional[str]) -> "EventRecordBuilder":
        self._answer = answer
        return self

    def outcome(self, outcome: Union[Outcome, str, None]) -> "EventRecordBuilder":
        self._outcome = outcome.value if isinstance(outcome, Outcome) else outcome
        return self

    def score_after(self, score: Optional[int]) -> "EventRecordBuilder":
        self._score_after = score
        return self

    def question_text(self, text: Optional[str]) -> "EventRecordBuilder":
        self._question_text = text
        return self

    def timestamp(self, timestamp: datetime) -> "EventRecordBuilder":
        """Override the default "now" timestamp."""
        self._timestamp = timestamp
        return self

    def build(self) -> EventRecord:
        return EventRecord(
            session_id=self._session_id,
            activity=self._activity,
            timestamp=self._timestamp or utc_now(),
            actor=self._actor,
            category=self._category,
            value=self._value,
            answer=self._answer,
            outcome=self._outcome,
            score_after=self._score_after,
            question_text=self._question_text,
        )
