# Area: Events
"""
trivia_session._events.csv_sink — CSV audit trail
=================================================

Writes one row per event in a process-mining friendly layout:

    Case_ID,Player_ID,Activity,Timestamp,Category,Question_Value,
    Answer_Given,Result,Score_After_Play

The file is truncated and given a header when the sink is opened. Rows
are flushed as they are written so the trail survives a crash.
"""

from __future__ import annotations
import csv
import logging
from pathlib import Path
from typing import List, Optional, Union

from .record import EventRecord
from .sink import NOT_APPLICABLE, EventSink

logger = logging.getLogger("trivia_session.events.csv_sink")

CSV_HEADER = [
    "Case_ID",
    "Player_ID",
    "Activity",
    "Timestamp",
    "Category",
    "Question_Value",
    "Answer_Given",
    "Result",
    "Score_After_Play",
]


def _cell(value: Optional[object]) -> str:
    if value is None:
        return NOT_APPLICABLE
    return str(value)


def record_to_row(record: EventRecord) -> List[str]:
    """Render a record as CSV cells, in header order."""
    return [
        record.session_id,
        record.actor,
        record.activity,
        record.timestamp.isoformat(),
        _cell(record.category),
        _cell(record.value),
        _cell(record.answer),
        _cell(record.outcome),
        _cell(record.score_after),
    ]


class CsvEventSink(EventSink):
    """Event sink backed by a CSV file."""

    def __init__(self, path: Union[str, Path] = "game_event_log.csv"):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.path, "w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)
        self._writer.writerow(CSV_HEADER)
        self._file.flush()
        logger.info(f"Event log opened at {self.path}")

    @property
    def closed(self) -> bool:
        return self._file.closed

    def record_event(self, record: EventRecord) -> None:
        self._writer.writerow(record_to_row(record))
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()
            logger.info(f"Event log closed at {self.path}")
