# Area: Events Tests
"""Tests for EventRecord, its builder and the event sinks."""

import csv
import io
from datetime import datetime, timezone

import pytest
from trivia_session._events.record import (
    SYSTEM_ACTOR,
    Activity,
    Outcome,
    EventRecord,
    EventRecordBuilder,
)
from trivia_session._events.sink import InMemoryEventSink, NullEventSink
from trivia_session._events.csv_sink import CSV_HEADER, CsvEventSink, record_to_row
from trivia_session._events.console_sink import ConsoleEventSink, GREEN, RED, ORANGE, RESET
from trivia_session._session.controller import SessionController
from trivia_session.errors import InvalidArgumentError

STAMP = datetime(2026, 3, 1, 14, 2, 11, tzinfo=timezone.utc)


def _answer_record(outcome=Outcome.CORRECT, answer="Water"):
    return (
        EventRecordBuilder("GAME_0001", Activity.ANSWER_QUESTION)
        .actor("player1")
        .category("Science")
        .value(100)
        .answer(answer)
        .outcome(outcome)
        .score_after(100)
        .question_text("What is H2O?")
        .timestamp(STAMP)
        .build()
    )


def _system_record():
    return EventRecordBuilder("GAME_0001", Activity.LOAD_FILE).timestamp(STAMP).build()


class TestEventRecordBuilder:
    """Tests for the fluent record builder."""

    def test_builds_full_record(self):
        record = _answer_record()
        assert record.session_id == "GAME_0001"
        assert record.activity == "Answer Question"
        assert record.actor == "player1"
        assert record.category == "Science"
        assert record.value == 100
        assert record.answer == "Water"
        assert record.outcome == "Correct"
        assert record.score_after == 100
        assert record.question_text == "What is H2O?"
        assert record.timestamp == STAMP
        assert record.is_system is False

    def test_minimal_record_defaults(self):
        record = EventRecordBuilder("GAME_0001", "Load File").build()
        assert record.actor == SYSTEM_ACTOR
        assert record.is_system is True
        assert record.category is None
        assert record.value is None
        assert record.outcome is None
        assert record.score_after is None
        assert record.timestamp.tzinfo is not None

    def test_blank_actor_falls_back_to_system(self):
        record = EventRecordBuilder("GAME_0001", Activity.LOAD_FILE).actor("").build()
        assert record.actor == SYSTEM_ACTOR

    @pytest.mark.parametrize("session_id,activity", [
        ("", Activity.LOAD_FILE),
        ("   ", Activity.LOAD_FILE),
        ("GAME_0001", ""),
        ("GAME_0001", None),
    ])
    def test_missing_required_fields_raise(self, session_id, activity):
        with pytest.raises(InvalidArgumentError):
            EventRecordBuilder(session_id, activity)

    def test_record_is_immutable(self):
        record = _answer_record()
        with pytest.raises(AttributeError):
            record.score_after = 500


class TestNullAndMemorySinks:
    """Tests for the trivial sinks."""

    def test_null_sink_accepts_anything(self):
        sink = NullEventSink()
        sink.record_event(_answer_record())
        sink.close()

    def test_controller_keeps_empty_memory_sink(self):
        """An empty in-memory sink has len 0; injection must not discard it."""
        sink = InMemoryEventSink()
        assert len(sink) == 0
        controller = SessionController(sink=sink)
        assert controller.sink is sink
        controller.system_event(Activity.LOAD_FILE, note="Success")
        controller.close()
        assert [r.activity for r in sink.records] == ["Load File"]
        assert sink.closed is True

    def test_memory_sink_keeps_order(self):
        sink = InMemoryEventSink()
        first, second = _system_record(), _answer_record()
        sink.record_event(first)
        sink.record_event(second)
        assert sink.records == [first, second]
        assert len(sink) == 2
        assert sink.closed is False
        sink.close()
        assert sink.closed is True


class TestCsvEventSink:
    """Tests for the CSV audit trail."""

    def _rows(self, path):
        with open(path, newline="", encoding="utf-8") as f:
            return list(csv.reader(f))

    def test_header_written_on_open(self, tmp_path):
        path = tmp_path / "log.csv"
        sink = CsvEventSink(path)
        sink.close()
        assert self._rows(path) == [CSV_HEADER]

    def test_answer_row(self, tmp_path):
        path = tmp_path / "log.csv"
        sink = CsvEventSink(path)
        sink.record_event(_answer_record())
        sink.close()
        rows = self._rows(path)
        assert rows[1] == [
            "GAME_0001", "player1", "Answer Question", STAMP.isoformat(),
            "Science", "100", "Water", "Correct", "100",
        ]

    def test_absent_fields_are_na(self, tmp_path):
        path = tmp_path / "log.csv"
        sink = CsvEventSink(path)
        sink.record_event(_system_record())
        sink.close()
        row = self._rows(path)[1]
        assert row[:3] == ["GAME_0001", "System", "Load File"]
        assert row[4:] == ["N/A"] * 5

    def test_commas_and_quotes_survive(self, tmp_path):
        """Free text containing separators is quoted, not split."""
        path = tmp_path / "log.csv"
        sink = CsvEventSink(path)
        sink.record_event(_answer_record(answer='Salt, "table" grade'))
        sink.close()
        row = self._rows(path)[1]
        assert len(row) == len(CSV_HEADER)
        assert row[6] == 'Salt, "table" grade'

    def test_rows_flushed_before_close(self, tmp_path):
        path = tmp_path / "log.csv"
        sink = CsvEventSink(path)
        sink.record_event(_answer_record())
        assert len(self._rows(path)) == 2
        sink.close()

    def test_file_truncated_on_open(self, tmp_path):
        path = tmp_path / "log.csv"
        path.write_text("old content\n")
        CsvEventSink(path).close()
        assert self._rows(path) == [CSV_HEADER]

    def test_close_is_idempotent(self, tmp_path):
        sink = CsvEventSink(tmp_path / "log.csv")
        sink.close()
        sink.close()
        assert sink.closed is True

    def test_record_to_row_zero_score_is_not_na(self):
        record = EventRecordBuilder("GAME_0001", Activity.ANSWER_QUESTION).score_after(0).build()
        assert record_to_row(record)[8] == "0"


class TestConsoleEventSink:
    """Tests for the terminal sink."""

    def test_plain_line(self):
        stream = io.StringIO()
        sink = ConsoleEventSink(stream=stream, use_color=False)
        sink.record_event(_answer_record())
        line = stream.getvalue().strip()
        assert line.startswith("14:02:11 | CASE: GAME_0001")
        assert line.endswith(
            "| CAT: Science | VALUE: 100 | ANSWER: Water | RESULT: Correct | SCORE: 100"
        )

    def test_system_line_uses_na(self):
        sink = ConsoleEventSink(use_color=False)
        line = sink.format_record(_system_record())
        for slot in ("CAT", "VALUE", "ANSWER", "RESULT", "SCORE"):
            assert f"{slot}: N/A" in line

    def test_value_without_category_is_shown(self):
        """Each field has its own slot, so a lone value is not dropped."""
        record = (
            EventRecordBuilder("GAME_0001", Activity.SELECT_QUESTION)
            .value(200)
            .timestamp(STAMP)
            .build()
        )
        line = ConsoleEventSink(use_color=False).format_record(record)
        assert "CAT: N/A | VALUE: 200 | ANSWER: N/A" in line

    @pytest.mark.parametrize("record,color", [
        (_answer_record(Outcome.CORRECT), GREEN),
        (_answer_record(Outcome.INCORRECT), RED),
        (_system_record(), ORANGE),
    ])
    def test_colors(self, record, color):
        line = ConsoleEventSink().format_record(record)
        assert line.startswith(color)
        assert line.endswith(RESET)

    def test_defaults_to_stdout(self, capsys):
        ConsoleEventSink(use_color=False).record_event(_system_record())
        assert "Load File" in capsys.readouterr().out
