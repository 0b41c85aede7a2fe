"""Readiness interests used when registering event sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

_READABLE = 0b0001
_WRITABLE = 0b0010
_AIO = 0b0100
_LIO = 0b1000
_PRIORITY = 0b10000

_NAMES = (
    (_READABLE, "READABLE"),
    (_WRITABLE, "WRITABLE"),
    (_AIO, "AIO"),
    (_LIO, "LIO"),
    (_PRIORITY, "PRIORITY"),
)


@dataclass(frozen=True, order=True, repr=False)
class Interest:
    """A non-empty set of readiness kinds to monitor for a source."""

    bits: int

    READABLE: ClassVar["Interest"]
    WRITABLE: ClassVar["Interest"]
    AIO: ClassVar["Interest"]
    LIO: ClassVar["Interest"]
    PRIORITY: ClassVar["Interest"]

    def __post_init__(self) -> None:
        if not isinstance(self.bits, int) or isinstance(self.bits, bool):
            raise TypeError("interest bits must be an int")
        if not 0 < self.bits < 0x100:
            raise ValueError("interest set must be non-empty and fit in one byte")

    def add(self, other: Interest) -> Interest:
        """Return the union of this interest set and ``other``."""
        return Interest(self.bits | other.bits)

    def remove(self, other: Interest) -> Optional[Interest]:
        """Return this set without ``other``, or None if nothing would remain."""
        remaining = self.bits & ~other.bits
        return Interest(remaining) if remaining else None

    def is_readable(self) -> bool:
        return bool(self.bits & _READABLE)

    def is_writable(self) -> bool:
        return bool(self.bits & _WRITABLE)

    def is_aio(self) -> bool:
        return bool(self.bits & _AIO)

    def is_lio(self) -> bool:
        return bool(self.bits & _LIO)

    def is_priority(self) -> bool:
        return bool(self.bits & _PRIORITY)

    def __or__(self, other: object) -> Interest:
        if not isinstance(other, Interest):
            return NotImplemented
        return self.add(other)

    def __repr__(self) -> str:
        return " | ".join(name for bit, name in _NAMES if self.bits & bit)


Interest.READABLE = Interest(_READABLE)
Interest.WRITABLE = Interest(_WRITABLE)
Interest.AIO = Interest(_AIO)
Interest.LIO = Interest(_LIO)
Interest.PRIORITY = Interest(_PRIORITY)