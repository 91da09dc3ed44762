"""Quotation tracking and range-aware marker search.

count_quotations walks the text once and returns the closed spans of quoted
text; index_of_without_range is a substring search that treats those spans
as invisible. Together they let the quote-aware scanner ignore markers that
only appear inside string literals.

Quoting is exclusive: while one quote character is open, no other quote
character can open, so ``"it's"`` is a single double-quoted range and the
apostrophe inside is plain content.

Thread Safety:
Pure functions. All state is local to one call.

"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

from tagscan.errors import InvalidArgumentError
from tagscan.ranges import Range
from tagscan.utils.logger import get_logger
from tagscan.utils.text import fold_case

logger = get_logger(__name__)


def validate_chars(argument: str, chars: Sequence[str]) -> tuple[str, ...]:
    """Check that every entry of ``chars`` is exactly one character.

    Args:
        argument: Parameter name used in the error message
        chars: Candidate characters (a str is treated as a sequence of chars)

    Returns:
        The characters as a tuple

    Raises:
        InvalidArgumentError: If an entry is not a one-character string
    """
    result = tuple(chars)
    for ch in result:
        if not isinstance(ch, str) or len(ch) != 1:
            raise InvalidArgumentError(argument, f"entries must be single characters, got {ch!r}")
    return result


def count_quotations(text: str, quote_chars: Sequence[str]) -> list[Range]:
    """Find every closed quoted span in ``text``.

    A quote character opens a span when no quote is currently open, and
    closes it when it matches the quote that opened it. Each completed
    open/close pair yields one Range covering both quote characters. A quote
    left open at the end of the text yields nothing.

    Args:
        text: Text to scan
        quote_chars: Quote characters to track, e.g. ``['"', "'"]``

    Returns:
        Ranges in left-to-right order; empty when ``quote_chars`` is empty

    Raises:
        InvalidArgumentError: If a quote entry is not a single character

    Examples:
        >>> count_quotations('a "b" c', ['"'])
        [Range(start=2, end=4)]
        >>> count_quotations('"it\\'s" and \\'x\\'', ['"', "'"])
        [Range(start=0, end=5), Range(start=11, end=13)]
        >>> count_quotations('say "unterminated', ['"'])
        []
    """
    quotes = validate_chars("quote_chars", quote_chars)
    result: list[Range] = []
    if not quotes:
        return result

    counts = [0] * len(quotes)
    for i, ch in enumerate(text):
        open_quotes = sum(c % 2 for c in counts)
        for j, quote in enumerate(quotes):
            if ch != quote or (open_quotes != 0 and counts[j] % 2 == 0):
                continue
            counts[j] += 1
            if counts[j] % 2 != 0:
                result.append(Range(i, i))
            elif result:
                result[-1] = result[-1].extend_to(i)

    if any(c % 2 for c in counts) and result:
        dropped = result.pop()
        logger.debug("Unterminated quote at offset %d ignored", dropped.start)
    return result


class SpanIndex:
    """Sorted, merged view of excluded ranges for O(log n) containment.

    Ranges may arrive in any order and may overlap; they are sorted and
    overlapping or touching spans are merged once, at construction.
    """

    __slots__ = ("_ends", "_starts")

    def __init__(self, ranges: Sequence[Range]) -> None:
        starts: list[int] = []
        ends: list[int] = []
        for r in sorted(ranges, key=lambda r: r.start):
            if ends and r.start <= ends[-1] + 1:
                ends[-1] = max(ends[-1], r.end)
            else:
                starts.append(r.start)
                ends.append(r.end)
        self._starts = starts
        self._ends = ends

    def end_of(self, idx: int) -> int:
        """Return the end of the span containing ``idx``, or -1."""
        pos = bisect_right(self._starts, idx) - 1
        if pos >= 0 and idx <= self._ends[pos]:
            return self._ends[pos]
        return -1


def find_outside_ranges(
    haystack: str,
    needle: str,
    start: int,
    spans: SpanIndex,
) -> int:
    """Locate ``needle`` in ``haystack`` skipping hits inside ``spans``.

    Works on already-folded strings and returns -1 when nothing is found;
    index_of_without_range is the public, validating wrapper.
    """
    length = len(haystack)
    while True:
        idx = haystack.find(needle, start)
        if idx == -1:
            return -1
        end = spans.end_of(idx)
        if end == -1:
            return idx
        start = end + 1
        if start >= length:
            return -1


def index_of_without_range(
    text: str,
    needle: str,
    start: int,
    ranges: Sequence[Range],
    *,
    ignore_case: bool = True,
) -> int | None:
    """Case-insensitive ``find`` that ignores matches inside excluded ranges.

    When a match falls within a range the search resumes just past that
    range's end, so a needle straddling the range boundary is not found
    at an offset inside the range.

    Args:
        text: Text to search
        needle: Substring to look for
        start: Offset to start searching from
        ranges: Spans whose matches are skipped
        ignore_case: Fold case before comparing (default True)

    Returns:
        Offset of the first acceptable match, or None

    Raises:
        InvalidArgumentError: If needle is empty or start is negative

    Examples:
        >>> quoted = count_quotations('"END" END', ['"'])
        >>> index_of_without_range('"END" END', "end", 0, quoted)
        6
    """
    if not needle:
        raise InvalidArgumentError("needle", "must not be empty")
    if start < 0:
        raise InvalidArgumentError("start", f"must be >= 0, got {start}")
    if ignore_case:
        text, needle = fold_case(text), fold_case(needle)
    idx = find_outside_ranges(text, needle, start, SpanIndex(ranges))
    return idx if idx != -1 else None
