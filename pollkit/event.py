"""Readiness events and the collection that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterator, List


@dataclass(frozen=True)
class Event:
    """A readiness state paired with the token of the source it belongs to."""

    token: Hashable
    readable: bool = False
    writable: bool = False
    error: bool = False
    read_closed: bool = False
    write_closed: bool = False
    priority: bool = False
    aio: bool = False
    lio: bool = False

    def is_readable(self) -> bool:
        return self.readable

    def is_writable(self) -> bool:
        return self.writable

    def is_error(self) -> bool:
        return self.error

    def is_read_closed(self) -> bool:
        return self.read_closed

    def is_write_closed(self) -> bool:
        return self.write_closed

    def is_priority(self) -> bool:
        return self.priority

    def is_aio(self) -> bool:
        return self.aio

    def is_lio(self) -> bool:
        return self.lio


@dataclass(repr=False)
class Events:
    """A bounded collection of readiness events, refilled on every poll."""

    _capacity: int
    _events: List[Event] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self._capacity < 0:
            raise ValueError("capacity must not be negative")

    @classmethod
    def with_capacity(cls, capacity: int) -> Events:
        """Return an empty collection able to hold ``capacity`` events."""
        return cls(capacity)

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._events

    def push(self, event: Event) -> None:
        """Append an event; raises OverflowError when the collection is full."""
        if len(self._events) >= self._capacity:
            raise OverflowError("events collection is full")
        self._events.append(event)

    def clear(self) -> None:
        self._events.clear()

    def __iter__(self) -> Iterator[Event]:
        return iter(tuple(self._events))

    def __len__(self) -> int:
        return len(self._events)

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(event) for event in self._events) + "]"