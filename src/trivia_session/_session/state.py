# Area: Session
"""
trivia_session._session.state — Session state
=============================================

Holds everything one session owns: its players, the shared dataset,
the turn tracker and the lifecycle state machine. The controller is the
only writer.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import logging

from .._data.models import Dataset, Player
from .enums import SessionStatus
from .state_machine import SessionStateMachine
from .turn_tracker import TurnTracker

logger = logging.getLogger("trivia_session.session.state")


@dataclass
class GameSession:
    """Full state of one session, from initialization to finish."""
    session_id: str
    dataset: Dataset
    players: List[Player] = field(default_factory=list)
    turns: TurnTracker = field(init=False)
    machine: SessionStateMachine = field(init=False)

    def __post_init__(self):
        self.turns = TurnTracker(self.players)
        self.machine = SessionStateMachine(label=self.session_id)

    @classmethod
    def create(cls, session_id: str, player_names: List[str], dataset: Dataset) -> "GameSession":
        """Build a session with one zero-score player per name, in order."""
        players = [
            Player(player_id=f"player{index}", name=name.strip())
            for index, name in enumerate(player_names, start=1)
        ]
        logger.info(
            f"[{session_id}] Created session with {len(players)} players: "
            f"{', '.join(p.name for p in players)}"
        )
        return cls(session_id=session_id, dataset=dataset, players=players)

    # ── Status helpers ───────────────────────────────────────

    @property
    def status(self) -> SessionStatus:
        return self.machine.current_state

    @property
    def is_finished(self) -> bool:
        return self.status == SessionStatus.FINISHED

    @property
    def current_player(self) -> Optional[Player]:
        return self.turns.current_player
