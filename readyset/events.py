"""A bounded collection of readiness events."""

from __future__ import annotations

from typing import Iterable, Iterator

from .event import Event


class Events:
    """Holds up to ``capacity`` events produced by a single poll."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._events: list[Event] = []

    @property
    def capacity(self) -> int:
        """The number of events this collection can hold."""
        return self._capacity

    def is_empty(self) -> bool:
        """True if no events are held."""
        return not self._events

    def clear(self) -> None:
        """Drop all held events."""
        self._events.clear()

    def fill(self, events: Iterable[Event]) -> int:
        """Replace the contents with at most ``capacity`` events; return how many were kept."""
        self._events = []
        for event in events:
            if len(self._events) >= self._capacity:
                break
            self._events.append(event)
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(event) for event in self._events) + "]"