# Area: Events
"""
Audit trail: event records and the sinks that store them.

This package contains:
- EventRecord / EventRecordBuilder and the activity vocabulary
- The EventSink contract with null and in-memory sinks
- CSV and console sinks
"""

from .record import (
    SYSTEM_ACTOR,
    Activity,
    Outcome,
    EventRecord,
    EventRecordBuilder,
)
from .sink import NOT_APPLICABLE, EventSink, NullEventSink, InMemoryEventSink
from .csv_sink import CSV_HEADER, CsvEventSink, record_to_row
from .console_sink import ConsoleEventSink

__all__ = [
    "SYSTEM_ACTOR",
    "Activity",
    "Outcome",
    "EventRecord",
    "EventRecordBuilder",
    "NOT_APPLICABLE",
    "EventSink",
    "NullEventSink",
    "InMemoryEventSink",
    "CSV_HEADER",
    "CsvEventSink",
    "record_to_row",
    "ConsoleEventSink",
]
