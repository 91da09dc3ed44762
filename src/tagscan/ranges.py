"""Closed character-index intervals.

A Range marks a span of the input by inclusive start and end offsets. The
Quotation Tracker produces them for quoted text, and callers may build their
own to hide arbitrary spans from the range-aware search.

Thread Safety:
Range is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from tagscan.errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Range:
    """Closed interval ``[start, end]`` of zero-based character offsets.

    Attributes:
        start: First offset covered by the range
        end: Last offset covered by the range (inclusive)

    Examples:
        >>> r = Range(4, 9)
        >>> 9 in r
        True
        >>> len(r)
        6
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise InvalidArgumentError("start", f"must be >= 0, got {self.start}")
        if self.end < self.start:
            raise InvalidArgumentError(
                "end", f"must be >= start ({self.start}), got {self.end}"
            )

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start <= index <= self.end

    def __len__(self) -> int:
        return self.end - self.start + 1

    def extend_to(self, end: int) -> Range:
        """Return a copy of this range whose end is moved to ``end``."""
        return Range(self.start, end)

    def slice(self, text: str) -> str:
        """Return the characters of ``text`` covered by this range."""
        return text[self.start : self.end + 1]
