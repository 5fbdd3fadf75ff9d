# Area: Events
"""
trivia_session._events.console_sink — Terminal audit trail
==========================================================

Prints each event as one coloured line, e.g.:

    14:02:11 | CASE: GAME_1A2B3C4D | ACTOR: player1  | Answer Question       | CAT: Science | VALUE: 100 | ANSWER: Water | RESULT: Correct | SCORE: 100
"""

from __future__ import annotations
import sys
from typing import Optional, TextIO

from .record import EventRecord, Outcome
from .sink import NOT_APPLICABLE, EventSink

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"         # Correct answers
RED = "\033[31m"           # Incorrect answers
ORANGE = "\033[38;5;208m"  # System events
RESET = "\033[0m"


def _slot(value: Optional[object]) -> object:
    return NOT_APPLICABLE if value is None else value


class ConsoleEventSink(EventSink):
    """Event sink that writes a formatted line per record."""

    def __init__(self, stream: Optional[TextIO] = None, use_color: bool = True):
        self._stream = stream
        self.use_color = use_color

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _color(self, record: EventRecord) -> str:
        if record.outcome == Outcome.CORRECT.value:
            return GREEN
        if record.outcome == Outcome.INCORRECT.value:
            return RED
        return ORANGE

    def format_record(self, record: EventRecord) -> str:
        line = (
            f"{record.timestamp.strftime('%H:%M:%S')} | CASE: {record.session_id} | "
            f"ACTOR: {record.actor:8} | {record.activity:21} | "
            f"CAT: {_slot(record.category)} | VALUE: {_slot(record.value)} | "
            f"ANSWER: {_slot(record.answer)} | RESULT: {_slot(record.outcome)} | "
            f"SCORE: {_slot(record.score_after)}"
        )
        if self.use_color:
            return f"{self._color(record)}{line}{RESET}"
        return line

    def record_event(self, record: EventRecord) -> None:
        print(self.format_record(record), file=self.stream)

    def close(self) -> None:
        self.stream.flush()
