"""Observer plumbing: publishers, listeners and the game's event log."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, Protocol


class Listener(Protocol):
    """Anything that can be told that a publisher changed."""

    def update(self, publisher: "Publisher") -> None: ...


class Publisher:
    """An object that tells its listeners when something happens to it."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    @property
    def listeners(self) -> tuple[Listener, ...]:
        return tuple(self._listeners)

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove every registration of ``listener``; unknown listeners are ignored."""
        self._listeners = [known for known in self._listeners if known is not listener]

    def notify(self) -> None:
        for listener in list(self._listeners):
            listener.update(self)


class EventLog:
    """Collects log text in memory and, when given a path, appends it to a file."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._entries: list[str] = []

    def write(self, text: str) -> None:
        self._entries.append(text)
        if self.path is not None:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(text)

    def lines(self) -> list[str]:
        return "".join(self._entries).splitlines()


class _LogListener:
    def __init__(self, log: EventLog, clock: Callable[[], datetime] = datetime.now) -> None:
        self.log = log
        self.clock = clock

    def _record(self, text: str) -> None:
        if text:
            self.log.write(text)


class PlayerLogger(_LogListener):
    """Writes the player's new position to the log each time it moves."""

    def update(self, publisher) -> None:
        self._record(publisher.describe_position(self.clock()))


class SquareLogger(_LogListener):
    """Writes a line to the log when the player picks up an item from a square."""

    def update(self, publisher) -> None:
        self._record(publisher.describe_pickup(self.clock()))