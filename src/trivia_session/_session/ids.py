# Area: Session
"""Session identifier generation."""

import uuid
from typing import Callable, Optional


class SessionIdGenerator:
    """
    Produces session (case) identifiers such as ``GAME_1A2B3C4D``.

    A controller holds its own generator; pass `factory` to get
    deterministic ids in tests.
    """

    def __init__(self, prefix: str = "GAME_", factory: Optional[Callable[[], str]] = None):
        self.prefix = prefix
        self._factory = factory if factory is not None else (lambda: uuid.uuid4().hex[:8].upper())

    def __call__(self) -> str:
        return f"{self.prefix}{self._factory()}"


class SequentialIdGenerator(SessionIdGenerator):
    """Generates GAME_0001, GAME_0002, ... in order."""

    def __init__(self, prefix: str = "GAME_", start: int = 1):
        self._next = start
        super().__init__(prefix=prefix, factory=self._take)

    def _take(self) -> str:
        value = self._next
        self._next += 1
        return f"{value:04d}"
