"""tagscan ScanAccumulator — opt-in profiling for tag scanning.

This module provides accumulated metrics during scanning:
- Number of scan calls and characters scanned
- Matches reported and regions replaced
- Total elapsed time

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from tagscan import divide
    from tagscan.profiling import profiled_scan

    with profiled_scan() as metrics:
        segments = divide(source, [("//<Custom>", "//</Custom>")])

    print(metrics.summary())
    # {"total_ms": 0.4, "scan_calls": 1, "chars_scanned": 5120, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during tag scanning.

    Attributes:
        start_time: Profiling start timestamp.
        scan_calls: Number of top-level scanner calls recorded.
        chars_scanned: Sum of input lengths across recorded calls.
        match_count: Number of tag regions reported.
        replacement_count: Number of regions rewritten by replace_all.

    """

    start_time: float = field(default_factory=perf_counter)
    scan_calls: int = 0
    chars_scanned: int = 0
    match_count: int = 0
    replacement_count: int = 0

    def record_scan(self, text_length: int, match_count: int) -> None:
        """Record one scanner call.

        Args:
            text_length: Length of the scanned text.
            match_count: Number of regions the call reported.

        """
        self.scan_calls += 1
        self.chars_scanned += text_length
        self.match_count += match_count

    def record_replace(self, text_length: int, replacement_count: int) -> None:
        """Record one replace_all call."""
        self.scan_calls += 1
        self.chars_scanned += text_length
        self.replacement_count += replacement_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, scan_calls, chars_scanned, match_count and
            replacement_count.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "scan_calls": self.scan_calls,
            "chars_scanned": self.chars_scanned,
            "match_count": self.match_count,
            "replacement_count": self.replacement_count,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator populated by scanner calls made inside the block.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
