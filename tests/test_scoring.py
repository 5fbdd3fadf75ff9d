# Area: Session Tests
"""Tests for scoring policies and the score keeper."""

import pytest
from trivia_session._data.models import Player
from trivia_session._session.scoring import (
    ScoringPolicy,
    StandardScoringPolicy,
    NoPenaltyScoringPolicy,
    ScoreKeeper,
    get_scoring_policy,
)
from trivia_session.errors import InvalidArgumentError


class SwingPolicy(ScoringPolicy):
    name = "Swing"

    def calculate_score(self, value, correct):
        return 3 * value if correct else -3 * value


class TestStandardScoringPolicy:
    """Tests for the default +value / -value policy."""

    def test_correct_adds_value(self):
        assert StandardScoringPolicy().calculate_score(200, True) == 200

    def test_incorrect_subtracts_value(self):
        assert StandardScoringPolicy().calculate_score(200, False) == -200

    def test_name(self):
        assert StandardScoringPolicy().name == "Standard Scoring"


class TestNoPenaltyScoringPolicy:
    """Tests for the no-penalty policy."""

    def test_incorrect_is_free(self):
        policy = NoPenaltyScoringPolicy()
        assert policy.calculate_score(300, True) == 300
        assert policy.calculate_score(300, False) == 0


class TestGetScoringPolicy:
    """Tests for config-key lookup."""

    def test_known_keys(self):
        assert isinstance(get_scoring_policy("standard"), StandardScoringPolicy)
        assert isinstance(get_scoring_policy(" No-Penalty "), NoPenaltyScoringPolicy)

    def test_unknown_key_raises(self):
        with pytest.raises(InvalidArgumentError):
            get_scoring_policy("triple")


class TestScoreKeeper:
    """Tests for applying policies to players."""

    def test_defaults_to_standard(self):
        assert isinstance(ScoreKeeper().policy, StandardScoringPolicy)

    def test_update_score_applies_delta(self):
        keeper = ScoreKeeper()
        player = Player("player1", "Alice")
        assert keeper.update_score(player, 100, True) == 100
        assert player.score == 100

    def test_negative_delta_clamped(self):
        """The keeper never drives a score below zero."""
        keeper = ScoreKeeper(SwingPolicy())
        player = Player("player1", "Alice", score=100)
        delta = keeper.update_score(player, 200, False)
        assert delta == -600
        assert player.score == 0

    def test_swap_policy(self):
        keeper = ScoreKeeper()
        keeper.policy = SwingPolicy()
        assert keeper.calculate(100, True) == 300

    def test_swap_rejects_non_policy(self):
        keeper = ScoreKeeper()
        with pytest.raises(InvalidArgumentError):
            keeper.policy = "standard"

    def test_update_requires_player(self):
        with pytest.raises(InvalidArgumentError):
            ScoreKeeper().update_score(None, 100, True)
