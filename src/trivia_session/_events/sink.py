# Area: Events
"""
trivia_session._events.sink — Event sink contract
=================================================

A sink durably records the session's audit trail. The controller calls
record_event() once per record, in emission order, and close() at
teardown. Sinks must render every field losslessly and mark absent
fields with NOT_APPLICABLE.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List

from .record import EventRecord

NOT_APPLICABLE = "N/A"


class EventSink(ABC):
    """Abstract destination for event records."""

    @abstractmethod
    def record_event(self, record: EventRecord) -> None:
        """Record one event. Called synchronously after each emission."""

    @abstractmethod
    def close(self) -> None:
        """Flush and release resources at session teardown."""


class NullEventSink(EventSink):
    """Sink that discards everything. Used when no sink is injected."""

    def record_event(self, record: EventRecord) -> None:
        pass

    def close(self) -> None:
        pass


class InMemoryEventSink(EventSink):
    """Sink that keeps records in a list, mostly for tests and embedding."""

    def __init__(self):
        self.records: List[EventRecord] = []
        self.closed = False

    def record_event(self, record: EventRecord) -> None:
        self.records.append(record)

    def close(self) -> None:
        self.closed = True

    def __len__(self) -> int:
        return len(self.records)
