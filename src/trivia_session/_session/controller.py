# Area: Session
"""
trivia_session._session.controller — Session Controller
=======================================================

Orchestrates one trivia session: validates and applies answers, keeps
the turn order, drives the SETUP → IN_PROGRESS → FINISHED lifecycle and
records every gameplay and system action as an EventRecord.

Each record is appended to the controller's own event log and then
forwarded to the injected EventSink. A failing sink is logged and
ignored; the in-memory state stays the source of truth.

Failed operations raise before anything is mutated:
- InvalidStateError: wrong status, or the question was already answered
- NotFoundError: unknown category/value pair
- InvalidArgumentError: malformed caller input
"""

from __future__ import annotations
import logging
from datetime import datetime
from typing import Callable, List, Optional, Union

from .._data.models import Category, Dataset, Player, Question
from .._events.record import (
    Activity,
    EventRecord,
    EventRecordBuilder,
    Outcome,
    utc_now,
)
from .._events.sink import EventSink, NullEventSink
from ..errors import InvalidArgumentError, InvalidStateError, NotFoundError
from .enums import SessionEvent, SessionStatus
from .ids import SessionIdGenerator
from .result import (
    SessionResult,
    build_standings,
    determine_winners,
    format_game_result,
)
from .scoring import ScoreKeeper, ScoringPolicy
from .state import GameSession

logger = logging.getLogger("trivia_session.session.controller")


class SessionController:
    """
    Main entry point for running a trivia session.

    Usage:
        controller = SessionController(sink=CsvEventSink("game_event_log.csv"))
        controller.initialize(["Alice", "Bob"], dataset)
        correct = controller.answer_question("Science", 100, "A")
        controller.advance_turn()
        if controller.check_and_end_session():
            print(controller.game_result_text())
        controller.close()
    """

    def __init__(
        self,
        sink: Optional[EventSink] = None,
        scoring_policy: Optional[ScoringPolicy] = None,
        id_generator: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Args:
            sink: Destination for event records (defaults to discarding them)
            scoring_policy: Initial policy (defaults to StandardScoringPolicy)
            id_generator: Callable producing session ids
            clock: Callable returning the timestamp for new records
        """
        self._sink = sink if sink is not None else NullEventSink()
        self._scores = ScoreKeeper(scoring_policy)
        self._new_id = id_generator if id_generator is not None else SessionIdGenerator()
        self._clock = clock if clock is not None else utc_now
        self._session_id = self._new_id()
        self._session: Optional[GameSession] = None
        self._events: List[EventRecord] = []

    # ══════════════════════════════════════════════════════════
    # LIFECYCLE
    # ══════════════════════════════════════════════════════════

    def initialize(self, player_names: List[str], dataset: Dataset) -> None:
        """
        Start a fresh session.

        Args:
            player_names: Display names, one per player, in turn order
            dataset: Validated question data

        Raises:
            InvalidArgumentError: If there are no players, a blank name,
                or no dataset
        """
        if not player_names:
            raise InvalidArgumentError("Player names cannot be empty")
        if any(name is None or not str(name).strip() for name in player_names):
            raise InvalidArgumentError("Player names cannot be blank")
        if dataset is None or not dataset.categories:
            raise InvalidArgumentError("Dataset cannot be empty")

        if self._session is not None:
            # Re-initializing starts a brand new case with its own log
            logger.info(f"[{self._session_id}] Discarding session for re-initialization")
            self._session_id = self._new_id()
            self._events = []

        session = GameSession.create(self._session_id, list(player_names), dataset)
        session.machine.transition(SessionEvent.START)
        self._session = session

        self._emit(
            self._builder(Activity.START_SESSION)
            .outcome(Outcome.SUCCESS)
            .build()
        )

    def check_and_end_session(self) -> bool:
        """
        Finish the session if every question has been answered.

        Returns:
            True if every question is answered (the session is then
            FINISHED), False otherwise
        """
        session = self._require_session("check session end")
        if not session.dataset.all_answered():
            return False
        if session.status == SessionStatus.IN_PROGRESS:
            self._finish(session, Outcome.COMPLETED)
        return True

    def force_end_session(self) -> None:
        """End the session early. No-op if it is already finished."""
        session = self._require_session("end session")
        if session.is_finished:
            return
        self._finish(session, Outcome.ENDED_EARLY)

    def _finish(self, session: GameSession, outcome: Outcome) -> None:
        session.machine.transition(SessionEvent.END)
        self._emit(
            self._builder(Activity.END_SESSION)
            .outcome(outcome)
            .build()
        )
        logger.info(f"[{session.session_id}] {self.game_result_text()}")

    def close(self) -> None:
        """Flush and close the event sink."""
        try:
            self._sink.close()
        except Exception:
            logger.exception(f"[{self._session_id}] Event sink failed to close")

    # ══════════════════════════════════════════════════════════
    # GAMEPLAY
    # ══════════════════════════════════════════════════════════

    def answer_question(self, category: str, value: int, answer: str) -> bool:
        """
        Answer a question on behalf of the current player.

        The turn is not advanced; call advance_turn() when ready.

        Args:
            category: Category name (case-insensitive)
            value: Point value of the question
            answer: Option label given by the player, e.g. "a" or " B "

        Returns:
            True if the answer was correct

        Raises:
            InvalidStateError: If the session is not in progress, there is
                no current player, or the question was already answered
            NotFoundError: If no question matches category/value
            InvalidArgumentError: If the answer is blank
        """
        session = self._require_in_progress("answer question")
        player = session.current_player
        if player is None:
            raise InvalidStateError("No current player")
        question = session.dataset.question(category, value)
        if question is None:
            logger.warning(f"[{session.session_id}] Question not found: {category} - {value}")
            raise NotFoundError(category, value)
        if question.answered:
            logger.warning(
                f"[{session.session_id}] Question already answered: "
                f"{question.category} - {question.value}"
            )
            raise InvalidStateError(
                f"Question has already been answered: {question.category} - {question.value}"
            )
        if answer is None or not str(answer).strip():
            raise InvalidArgumentError("Answer cannot be empty")

        correct = question.is_correct(answer)
        self._scores.update_score(player, question.value, correct)
        question.answered = True

        self._emit(
            self._builder(Activity.ANSWER_QUESTION)
            .actor(player.player_id)
            .category(question.category)
            .value(question.value)
            .answer(self._answer_text(question, answer))
            .outcome(Outcome.CORRECT if correct else Outcome.INCORRECT)
            .score_after(player.score)
            .question_text(question.text)
            .build()
        )
        return correct

    @staticmethod
    def _answer_text(question: Question, answer: str) -> str:
        label = answer.strip()
        return question.option_text(label) or label

    def advance_turn(self) -> Optional[Player]:
        """Pass the turn to the next player and return them."""
        session = self._require_in_progress("advance turn")
        player = session.turns.advance()
        if player is not None:
            logger.debug(
                f"[{session.session_id}] Turn {session.turns.total_turns}: {player.name}"
            )
        return player

    def set_scoring_policy(self, policy: ScoringPolicy) -> None:
        """
        Swap the scoring policy. Only answers given afterwards are affected.

        Allowed in any status, including before initialize() and after
        FINISHED. Scores are never recomputed; a swap after the session
        has finished only adds a Change Scoring Policy record.

        Raises:
            InvalidArgumentError: If policy is not a ScoringPolicy
        """
        self._scores.policy = policy
        self._emit(
            self._builder(Activity.CHANGE_SCORING_POLICY)
            .outcome(policy.name)
            .build()
        )

    def system_event(
        self,
        activity: Union[Activity, str],
        category: Optional[str] = None,
        value: Optional[int] = None,
        note: Optional[str] = None,
    ) -> EventRecord:
        """
        Record a bookkeeping event (file loaded, report written, ...).

        Game state is never touched. Allowed in any status, including
        before initialize().

        Raises:
            InvalidArgumentError: For unknown activities or Answer Question
        """
        try:
            activity = Activity(activity.value if isinstance(activity, Activity) else activity)
        except ValueError:
            raise InvalidArgumentError(f"Unknown activity: {activity}") from None
        if activity == Activity.ANSWER_QUESTION:
            raise InvalidArgumentError("Answers must go through answer_question()")

        record = (
            self._builder(activity)
            .category(category)
            .value(value)
            .outcome(note)
            .build()
        )
        self._emit(record)
        return record

    # ══════════════════════════════════════════════════════════
    # EVENTS
    # ══════════════════════════════════════════════════════════

    def _builder(self, activity: Activity) -> EventRecordBuilder:
        return EventRecordBuilder(self._session_id, activity).timestamp(self._clock())

    def _emit(self, record: EventRecord) -> None:
        self._events.append(record)
        try:
            self._sink.record_event(record)
        except Exception:
            logger.exception(
                f"[{record.session_id}] Event sink failed on '{record.activity}'; continuing"
            )

    @property
    def events(self) -> List[EventRecord]:
        """Every record emitted for the current session, in order."""
        return list(self._events)

    @property
    def sink(self) -> EventSink:
        return self._sink

    # ══════════════════════════════════════════════════════════
    # QUERIES
    # ══════════════════════════════════════════════════════════

    def _require_session(self, action: str) -> GameSession:
        if self._session is None:
            raise InvalidStateError(f"Cannot {action}: session has not been initialized")
        return self._session

    def _require_in_progress(self, action: str) -> GameSession:
        session = self._require_session(action)
        session.machine.require(SessionStatus.IN_PROGRESS, action)
        return session

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def status(self) -> SessionStatus:
        if self._session is None:
            return SessionStatus.SETUP
        return self._session.status

    @property
    def is_finished(self) -> bool:
        return self.status == SessionStatus.FINISHED

    @property
    def scoring_policy(self) -> ScoringPolicy:
        return self._scores.policy

    @property
    def dataset(self) -> Optional[Dataset]:
        return self._session.dataset if self._session else None

    @property
    def current_player(self) -> Optional[Player]:
        return self._session.current_player if self._session else None

    @property
    def players(self) -> List[Player]:
        return list(self._session.players) if self._session else []

    @property
    def categories(self) -> List[Category]:
        return list(self._session.dataset.categories) if self._session else []

    @property
    def total_turns(self) -> int:
        return self._session.turns.total_turns if self._session else 0

    def available_categories(self) -> List[Category]:
        return self._session.dataset.available_categories() if self._session else []

    def available_questions(self, category: str) -> List[Question]:
        """
        Unanswered questions in `category`.

        Raises:
            NotFoundError: If the category does not exist
        """
        session = self._require_session("list questions")
        found = session.dataset.category(category)
        if found is None:
            raise NotFoundError(category)
        return found.available_questions()

    def determine_winners(self) -> List[Player]:
        return determine_winners(self.players)

    def is_tie(self) -> bool:
        return len(self.determine_winners()) > 1

    def game_result_text(self) -> str:
        return format_game_result(self.determine_winners())

    def build_result(self) -> SessionResult:
        """Snapshot of scores, statistics and winners for reporting."""
        winners = self.determine_winners()
        return SessionResult(
            session_id=self._session_id,
            status=self.status.value,
            scoring_policy=self.scoring_policy.name,
            total_turns=self.total_turns,
            standings=build_standings(self.players, self._events),
            winner_ids=[w.player_id for w in winners],
            is_tie=len(winners) > 1,
            result_text=format_game_result(winners),
        )

    def summary_text(self) -> str:
        """Short multi-line description of the session."""
        return (
            f"Game ID: {self._session_id}\n"
            f"Players: {len(self.players)}\n"
            f"Total Turns: {self.total_turns}\n"
            f"Game State: {self.status.value}\n"
            f"Scoring: {self.scoring_policy.name}"
        )
