# Area: Reports
"""
trivia_session._reports.snapshot — Session snapshot builder
===========================================================

Builds a JSON-serializable, read-only view of a session for report
generators.
"""

from typing import TYPE_CHECKING

from .._data.models import Category, Player
from ..types import CategorySnapshot, PlayerSnapshot, SessionSnapshot

if TYPE_CHECKING:
    from .._session.controller import SessionController


def build_session_snapshot(controller: "SessionController") -> SessionSnapshot:
    """Build a serializable snapshot of players, board and status."""
    current = controller.current_player
    return {
        "session_id": controller.session_id,
        "status": controller.status.value,
        "scoring_policy": controller.scoring_policy.name,
        "total_turns": controller.total_turns,
        "current_player": current.player_id if current else None,
        "players": [_player_snapshot(p) for p in controller.players],
        "categories": [_category_snapshot(c) for c in controller.categories],
        "event_count": len(controller.events),
    }


def _player_snapshot(player: Player) -> PlayerSnapshot:
    return {
        "player_id": player.player_id,
        "name": player.name,
        "score": player.score,
    }


def _category_snapshot(category: Category) -> CategorySnapshot:
    """Per-question answered flags plus a completion marker."""
    return {
        "name": category.name,
        "completed": category.all_answered(),
        "questions": [
            {"value": q.value, "answered": q.answered}
            for q in category.questions
        ],
    }
