# Area: Session
"""
trivia_session._session.scoring — Scoring policies
==================================================

A scoring policy maps a question's point value and the correctness of
an answer to a signed score delta. The ScoreKeeper applies that delta
to a player through the clamped add/subtract operations, so a policy
can never drive a score below zero.

Custom policies subclass ScoringPolicy:

    class DoubleOrNothing(ScoringPolicy):
        name = "Double or Nothing"

        def calculate_score(self, value, correct):
            return value * 2 if correct else 0
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from .._data.models import Player
from ..errors import InvalidArgumentError


class ScoringPolicy(ABC):
    """Abstract scoring rule. Subclasses set `name` and implement one method."""

    name: str = "Custom Scoring"

    @abstractmethod
    def calculate_score(self, value: int, correct: bool) -> int:
        """
        Compute the score change for an answer.

        Parameters
        ----------
        value : int
            Point value of the question (always positive).
        correct : bool
            Whether the answer was correct.

        Returns
        -------
        int
            Points to add (positive) or subtract (negative).
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class StandardScoringPolicy(ScoringPolicy):
    """Full value for a correct answer, minus the value for a wrong one."""

    name = "Standard Scoring"

    def calculate_score(self, value: int, correct: bool) -> int:
        return value if correct else -value


class NoPenaltyScoringPolicy(ScoringPolicy):
    """Full value for a correct answer, nothing lost for a wrong one."""

    name = "No Penalty Scoring"

    def calculate_score(self, value: int, correct: bool) -> int:
        return value if correct else 0


SCORING_POLICIES: Dict[str, Type[ScoringPolicy]] = {
    "standard": StandardScoringPolicy,
    "no-penalty": NoPenaltyScoringPolicy,
}


def get_scoring_policy(key: str) -> ScoringPolicy:
    """Instantiate a built-in policy by its config key."""
    policy_cls = SCORING_POLICIES.get((key or "").strip().lower())
    if policy_cls is None:
        raise InvalidArgumentError(
            f"Unknown scoring policy '{key}'. Choose from: {', '.join(SCORING_POLICIES)}"
        )
    return policy_cls()


class ScoreKeeper:
    """Applies the active scoring policy to players."""

    def __init__(self, policy: Optional[ScoringPolicy] = None):
        self._policy = policy if policy is not None else StandardScoringPolicy()

    @property
    def policy(self) -> ScoringPolicy:
        return self._policy

    @policy.setter
    def policy(self, policy: ScoringPolicy) -> None:
        if not isinstance(policy, ScoringPolicy):
            raise InvalidArgumentError("Scoring policy must be a ScoringPolicy instance")
        self._policy = policy

    def calculate(self, value: int, correct: bool) -> int:
        """Delta the active policy would apply, without applying it."""
        return self._policy.calculate_score(value, correct)

    def update_score(self, player: Player, value: int, correct: bool) -> int:
        """Apply the policy's delta to `player` and return the delta."""
        if player is None:
            raise InvalidArgumentError("Player cannot be None")
        delta = self.calculate(value, correct)
        player.apply_delta(delta)
        return delta
