# Area: Session Tests
"""Tests for the session state machine and turn tracker."""

import pytest
from trivia_session._data.models import Player
from trivia_session._session.state_machine import SessionStateMachine
from trivia_session._session.enums import SessionStatus, SessionEvent
from trivia_session._session.turn_tracker import TurnTracker
from trivia_session.errors import InvalidStateError


class TestSessionStateMachineBase:
    """Tests for basic state machine functionality."""

    def test_initial_state_is_setup(self):
        sm = SessionStateMachine()
        assert sm.current_state == SessionStatus.SETUP

    def test_can_transition_returns_true_for_valid(self):
        sm = SessionStateMachine()
        assert sm.can_transition(SessionEvent.START) is True

    def test_can_transition_returns_false_for_invalid(self):
        sm = SessionStateMachine()
        assert sm.can_transition(SessionEvent.END) is False

    def test_transition_raises_on_invalid(self):
        """SETUP cannot skip straight to FINISHED."""
        sm = SessionStateMachine()
        with pytest.raises(InvalidStateError):
            sm.transition(SessionEvent.END)


class TestSessionStateMachineTransitions:
    """Tests for the full lifecycle."""

    def test_full_happy_path(self):
        sm = SessionStateMachine()

        sm.transition(SessionEvent.START)
        assert sm.current_state == SessionStatus.IN_PROGRESS

        sm.transition(SessionEvent.END)
        assert sm.current_state == SessionStatus.FINISHED
        assert sm.is_terminal is True

    def test_no_transition_reverses(self):
        sm = SessionStateMachine()
        sm.transition(SessionEvent.START)
        with pytest.raises(InvalidStateError):
            sm.transition(SessionEvent.START)

    def test_finished_is_terminal(self):
        sm = SessionStateMachine()
        sm.transition(SessionEvent.START)
        sm.transition(SessionEvent.END)
        for event in SessionEvent:
            with pytest.raises(InvalidStateError):
                sm.transition(event)

    def test_require(self):
        sm = SessionStateMachine()
        with pytest.raises(InvalidStateError, match="answer question"):
            sm.require(SessionStatus.IN_PROGRESS, "answer question")
        sm.transition(SessionEvent.START)
        sm.require(SessionStatus.IN_PROGRESS, "answer question")


class TestTurnTracker:
    """Tests for circular turn order."""

    def _players(self, count):
        return [Player(f"player{i}", f"P{i}") for i in range(1, count + 1)]

    def test_starts_at_first_player(self):
        tracker = TurnTracker(self._players(3))
        assert tracker.current_index == 0
        assert tracker.current_player.player_id == "player1"
        assert tracker.total_turns == 0

    def test_advance_wraps_around(self):
        tracker = TurnTracker(self._players(2))
        assert tracker.advance().player_id == "player2"
        assert tracker.advance().player_id == "player1"
        assert tracker.total_turns == 2

    @pytest.mark.parametrize("count,advances", [(1, 5), (2, 7), (3, 10), (4, 4)])
    def test_advance_is_pure_rotation(self, count, advances):
        """After N advances with P players the index is N mod P."""
        tracker = TurnTracker(self._players(count))
        for _ in range(advances):
            tracker.advance()
        assert tracker.current_index == advances % count
        assert tracker.total_turns == advances

    def test_empty_tracker_is_safe_noop(self):
        tracker = TurnTracker([])
        assert tracker.current_player is None
        assert tracker.advance() is None
        assert tracker.current_index == 0
        assert tracker.total_turns == 0
