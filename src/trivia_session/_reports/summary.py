# Area: Reports
"""
trivia_session._reports.summary — Text summary report
=====================================================

Renders a finished (or abandoned) session as a plain-text report: the
players, a turn-by-turn account rebuilt from the event log, final
scores and the result.
"""

from __future__ import annotations
import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional, Union

from .._events.record import Activity

if TYPE_CHECKING:
    from .._session.controller import SessionController

logger = logging.getLogger("trivia_session.reports.summary")

TITLE = "TRIVIA SESSION SUMMARY REPORT"


def build_summary_text(
    controller: "SessionController",
    generated_at: Optional[datetime] = None,
) -> str:
    """Render the report for `controller` as a string."""
    players = controller.players
    names = {p.player_id: p.name for p in players}
    generated = (generated_at or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")

    lines: List[str] = [
        TITLE,
        "=" * len(TITLE),
        f"Generated: {generated}",
        f"Case ID: {controller.session_id}",
        f"Status: {controller.status.value}",
        f"Scoring: {controller.scoring_policy.name}",
        f"Players: {', '.join(p.name for p in players)}",
        "",
        "Gameplay Summary:",
        "-----------------",
    ]

    previous: Dict[str, int] = {p.player_id: 0 for p in players}
    turn = 0
    for record in controller.events:
        if record.activity != Activity.ANSWER_QUESTION.value:
            continue
        turn += 1
        name = names.get(record.actor, record.actor)
        score = record.score_after if record.score_after is not None else 0
        delta = score - previous.get(record.actor, 0)
        previous[record.actor] = score
        lines.extend([
            f"Turn {turn}: {name} selected {record.category} for {record.value} pts",
            f"  Question: {record.question_text or ''}",
            f"  Answer: {record.answer} - {record.outcome} ({delta:+d} pts)",
            f"  Score after turn: {name} = {score}",
        ])
    if turn == 0:
        lines.append("No questions were answered.")

    lines.extend(["", "Final Scores:", "-------------"])
    for player in players:
        lines.append(f"{player.name}: {player.score}")

    lines.extend(["", "Result:", "-------", controller.game_result_text(), ""])
    return "\n".join(lines)


def write_summary_report(
    controller: "SessionController",
    path: Union[str, Path] = "summary_report.txt",
) -> Path:
    """Write the summary report and return its path."""
    report_path = Path(path)
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(build_summary_text(controller), encoding="utf-8")
    logger.info(f"[{controller.session_id}] Summary report written to {report_path}")
    return report_path
