from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from schemagraph.interaction.controller import DialogAction


@dataclass(frozen=True)
class FileSelected:
    path: Path
    media_type: str | None = None


@dataclass(frozen=True)
class FileLoaded:
    content: str
    name: str = ""
    media_type: str | None = None


@dataclass(frozen=True)
class FileReadFailed:
    name: str
    reason: str


@dataclass(frozen=True)
class NodeClicked:
    node_id: str


@dataclass(frozen=True)
class DialogChoice:
    action: DialogAction


class EventQueue:
    """
    Single-threaded queue with synchronous handlers.
    Each handler runs to completion before the next event is taken; events
    posted from inside a handler are processed in the same drain.
    """

    def __init__(self) -> None:
        self._pending: deque[Any] = deque()
        self._handlers: dict[type, Callable[[Any], None]] = {}
        self._draining = False

    def register(self, event_type: type, handler: Callable[[Any], None]) -> None:
        self._handlers[event_type] = handler

    def post(self, event: Any) -> None:
        self._pending.append(event)

    def __len__(self) -> int:
        return len(self._pending)

    def process(self) -> int:
        """Drain the queue. Returns the number of events handled."""
        if self._draining:
            return 0
        self._draining = True
        handled = 0
        try:
            while self._pending:
                event = self._pending.popleft()
                handler = self._handlers.get(type(event))
                if handler is None:
                    raise TypeError(f"No handler registered for {type(event).__name__}")
                handler(event)
                handled += 1
        finally:
            self._draining = False
        return handled
