# Area: Session
"""Circular turn order over the session's players."""

from typing import List, Optional

from .._data.models import Player


class TurnTracker:
    """Holds the player order, the active index and the total turns taken."""

    def __init__(self, players: List[Player]):
        self._players = list(players)
        self.current_index = 0
        self.total_turns = 0

    @property
    def players(self) -> List[Player]:
        return list(self._players)

    @property
    def current_player(self) -> Optional[Player]:
        if not self._players:
            return None
        return self._players[self.current_index]

    def advance(self) -> Optional[Player]:
        """Move to the next player, wrapping around. No-op with no players."""
        if not self._players:
            return None
        self.current_index = (self.current_index + 1) % len(self._players)
        self.total_turns += 1
        return self._players[self.current_index]

    def __len__(self) -> int:
        return len(self._players)
