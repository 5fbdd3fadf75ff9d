# Area: Session
"""
trivia_session._session.result — Session Result Dataclasses
===========================================================

Winner determination and the SessionResult / PlayerStanding records a
report generator consumes once a session is over.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .._data.models import Player
from .._events.record import Activity, EventRecord, Outcome


def determine_winners(players: List[Player]) -> List[Player]:
    """Every player holding the highest score, in player order."""
    if not players:
        return []
    highest = max(p.score for p in players)
    return [p for p in players if p.score == highest]


def format_game_result(winners: List[Player]) -> str:
    """Human readable outcome for a winner list."""
    if not winners:
        return "No winners!"
    if len(winners) == 1:
        return f"Winner: {winners[0].name} with {winners[0].score} points!"
    listed = ", ".join(f"{w.name} ({w.score} points)" for w in winners)
    return f"It's a tie! Winners: {listed}"


@dataclass
class PlayerStanding:
    """
    One player's final score and statistics.

    Attributes:
        player_id: Unique identifier for the player
        name: Display name
        score: Final score
        questions_answered: Answers given by this player
        correct_answers: Answers that were correct
    """

    player_id: str
    name: str
    score: int
    questions_answered: int = 0
    correct_answers: int = 0


@dataclass
class SessionResult:
    """
    Complete outcome of a session.

    Attributes:
        session_id: Session (case) identifier
        status: Lifecycle status when the result was built
        scoring_policy: Name of the policy active at the end
        total_turns: Turns taken
        standings: One entry per player, in player order
        winner_ids: Ids of every player with the top score
        is_tie: True if more than one player shares the top score
        result_text: Human readable outcome
    """

    session_id: str
    status: str
    scoring_policy: str
    total_turns: int
    standings: List[PlayerStanding] = field(default_factory=list)
    winner_ids: List[str] = field(default_factory=list)
    is_tie: bool = False
    result_text: str = "No winners!"

    def standing(self, player_id: str) -> Optional[PlayerStanding]:
        for entry in self.standings:
            if entry.player_id == player_id:
                return entry
        return None


def build_standings(players: List[Player], events: Iterable[EventRecord]) -> List[PlayerStanding]:
    """Final scores plus per-player answer counts taken from the event log."""
    standings = {
        p.player_id: PlayerStanding(player_id=p.player_id, name=p.name, score=p.score)
        for p in players
    }
    for record in events:
        if record.activity != Activity.ANSWER_QUESTION.value:
            continue
        entry = standings.get(record.actor)
        if entry is None:
            continue
        entry.questions_answered += 1
        if record.outcome == Outcome.CORRECT.value:
            entry.correct_answers += 1
    return list(standings.values())
