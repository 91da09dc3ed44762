"""Tag Matcher: locate regions bounded by a start and an end marker.

Two variants share the same cursor policy:

- find_tags balances exclusion pairs (for example ``{`` / ``}``) between the
  markers, so an end marker that sits inside an unbalanced block is not
  taken as the end of the region.
- find_tags_quoted hides markers that appear inside quoted text.

find_tag_pairs runs find_tags for several marker pairs in sequence.

After each match the cursor moves to the end of the *start* marker, not past
the end marker. A region that contains another occurrence of the start
marker is therefore reported again from that inner occurrence, which lets
callers see nested same-name regions. Callers that need non-overlapping
regions (the Divider does) skip matches that begin inside an earlier one.

All lookups are case-insensitive by default (see tagscan.config).

Thread Safety:
Pure functions. All state is local to one call; the TagHeader shared by
the results is immutable.

"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from tagscan.config import get_scan_config
from tagscan.errors import InvalidArgumentError
from tagscan.profiling import get_scan_accumulator
from tagscan.quotes import SpanIndex, count_quotations, find_outside_ranges, validate_chars
from tagscan.tags import TagHeader, TagInfo
from tagscan.utils.logger import get_logger

logger = get_logger(__name__)

TagPairs = Sequence[tuple[str, str]] | Sequence[str]


def _require_marker(argument: str, marker: object) -> str:
    if not isinstance(marker, str) or not marker:
        raise InvalidArgumentError(argument, "must be a non-empty string")
    return marker


def _require_start(from_index: int) -> int:
    if from_index < 0:
        raise InvalidArgumentError("from_index", f"must be >= 0, got {from_index}")
    return from_index


def normalize_tag_pairs(tag_pairs: TagPairs) -> list[tuple[str, str]]:
    """Turn ``tag_pairs`` into a list of ``(start_tag, end_tag)`` tuples.

    Accepts either a sequence of 2-tuples or a flat, even-length sequence of
    alternating start and end markers.

    Raises:
        InvalidArgumentError: For odd flat lists, malformed pairs or empty markers

    Examples:
        >>> normalize_tag_pairs(["<a>", "</a>", "<b>", "</b>"])
        [('<a>', '</a>'), ('<b>', '</b>')]
    """
    items = list(tag_pairs)
    if items and all(isinstance(item, str) for item in items):
        if len(items) % 2 != 0:
            raise InvalidArgumentError(
                "tag_pairs", f"flat marker list must have even length, got {len(items)}"
            )
        pairs = [(items[i], items[i + 1]) for i in range(0, len(items), 2)]
    else:
        pairs = []
        for item in items:
            if isinstance(item, str) or not isinstance(item, Sequence) or len(item) != 2:
                raise InvalidArgumentError(
                    "tag_pairs", f"expected (start_tag, end_tag) pairs, got {item!r}"
                )
            pairs.append((item[0], item[1]))

    for start_tag, end_tag in pairs:
        _require_marker("start_tag", start_tag)
        _require_marker("end_tag", end_tag)
    return pairs


def _balance(text: str, begin: int, end_idx: int, exclude: tuple[str, ...]) -> tuple[int, int]:
    """Count exclusion pairs from ``begin``, past ``end_idx`` while unbalanced.

    Even positions of ``exclude`` open a block, odd positions close one.

    Returns:
        ``(anchor, balance)``: the offset of the last exclusion character
        seen (``begin`` if none) and the final sum of all counters.
    """
    counters = [0] * len(exclude)
    anchor = begin
    length = len(text)
    idx = begin

    while idx < end_idx or (idx < length and sum(counters) != 0):
        ch = text[idx]
        for j, marker in enumerate(exclude):
            if ch == marker:
                anchor = idx
                counters[j] += 1 if j % 2 == 0 else -1
        idx += 1
    return anchor, sum(counters)


def _collect(
    header: TagHeader,
    start_tag: str,
    end_tag: str,
    from_index: int,
    find: Callable[[str, int], int],
    settle_end: Callable[[int, int, int], int] | None = None,
) -> list[TagInfo]:
    """Shared match loop for both matcher variants.

    ``find(needle, start)`` locates a folded needle (-1 when absent).
    ``settle_end(start_idx, start_end, end_idx)`` may move the candidate end
    marker; returning -1 stops the scan.
    """
    start_needle = header.fold(start_tag)
    end_needle = header.fold(end_tag)
    result: list[TagInfo] = []

    while True:
        start_idx = find(start_needle, from_index)
        if start_idx == -1:
            break
        start_end = start_idx + len(start_tag)
        end_idx = find(end_needle, start_end)
        if end_idx == -1:
            logger.debug("Start tag %r at %d has no end tag %r", start_tag, start_idx, end_tag)
            break
        if settle_end is not None:
            end_idx = settle_end(start_idx, start_end, end_idx)
            if end_idx == -1:
                break

        result.append(
            TagInfo(
                header=header,
                start_tag=start_tag,
                start_tag_index=start_idx,
                end_tag=end_tag,
                end_tag_index=end_idx,
            )
        )
        from_index = start_end
    return result


def _scan_balanced(
    header: TagHeader,
    start_tag: str,
    end_tag: str,
    from_index: int,
    exclude: tuple[str, ...],
) -> list[TagInfo]:
    folded = header.folded
    if not exclude:
        return _collect(header, start_tag, end_tag, from_index, folded.find)

    end_needle = header.fold(end_tag)

    def settle(start_idx: int, start_end: int, end_idx: int) -> int:
        anchor, balance = _balance(header.text, start_end, end_idx, exclude)
        if anchor <= end_idx or balance != 0:
            return end_idx
        moved = folded.find(end_needle, anchor)
        logger.debug(
            "End tag %r for start at %d moved from %d to %d to balance %r",
            end_tag,
            start_idx,
            end_idx,
            moved,
            "".join(exclude),
        )
        return moved

    return _collect(header, start_tag, end_tag, from_index, folded.find, settle)


def find_tags(
    text: str,
    start_tag: str,
    end_tag: str,
    from_index: int = 0,
    exclude_chars: Sequence[str] | None = None,
) -> list[TagInfo]:
    """Find every region between ``start_tag`` and ``end_tag``.

    For each start marker found at or after the cursor, the nearest end
    marker after it is taken as a candidate. When ``exclude_chars`` is
    given, opener/closer characters between the markers are counted; if
    they are unbalanced at the candidate, counting continues past it until
    the balance returns to zero, and the end marker is searched again from
    the last exclusion character seen.

    Args:
        text: Text to scan
        start_tag: Start marker
        end_tag: End marker
        from_index: Offset to start scanning from
        exclude_chars: Alternating opener/closer characters, e.g.
            ``["{", "}"]``. None uses ``ScanConfig.exclude_chars``.

    Returns:
        Matches in the order found. Empty when nothing matches, including
        for a start marker without an end marker.

    Raises:
        InvalidArgumentError: For empty markers, a negative from_index or
            multi-character exclusion entries

    Examples:
        >>> [t.full_text for t in find_tags("<a>1<b>2</b>3</a>", "<b>", "</b>")]
        ['<b>2</b>']
        >>> t = find_tags("BEGIN { END } END", "BEGIN", "END", 0, ["{", "}"])[0]
        >>> t.end_tag_index
        14
    """
    _require_marker("start_tag", start_tag)
    _require_marker("end_tag", end_tag)
    _require_start(from_index)
    config = get_scan_config()
    exclude = validate_chars(
        "exclude_chars", config.exclude_chars if exclude_chars is None else exclude_chars
    )

    header = TagHeader(text, ignore_case=config.ignore_case)
    result = _scan_balanced(header, start_tag, end_tag, from_index, exclude)

    acc = get_scan_accumulator()
    if acc is not None:
        acc.record_scan(text_length=len(text), match_count=len(result))
    return result


def scan_pairs(header: TagHeader, pairs: Sequence[tuple[str, str]]) -> list[TagInfo]:
    """Run the matcher for each pair, chaining the cursor between pairs.

    The next pair starts scanning just past the previous pair's last match.
    A pair without matches leaves the cursor unchanged.
    """
    result: list[TagInfo] = []
    from_index = 0
    for start_tag, end_tag in pairs:
        found = _scan_balanced(header, start_tag, end_tag, from_index, ())
        if found:
            result.extend(found)
            from_index = found[-1].end_tag_end_index
    return result


def find_tag_pairs(text: str, tag_pairs: TagPairs) -> list[TagInfo]:
    """Find regions for several marker pairs in sequence.

    Args:
        text: Text to scan
        tag_pairs: ``[(start, end), ...]`` or a flat even-length list
            ``[start, end, start, end, ...]``

    Returns:
        Matches of all pairs, grouped by pair in the given order

    Raises:
        InvalidArgumentError: For malformed pair lists or empty markers

    Examples:
        >>> source = "Project(a)EndProject Global x EndGlobal"
        >>> [t.inner_text for t in find_tag_pairs(
        ...     source, [("Project(", "EndProject"), ("Global", "EndGlobal")])]
        ['a)', ' x ']
    """
    pairs = normalize_tag_pairs(tag_pairs)
    header = TagHeader(text, ignore_case=get_scan_config().ignore_case)
    result = scan_pairs(header, pairs)

    acc = get_scan_accumulator()
    if acc is not None:
        acc.record_scan(text_length=len(text), match_count=len(result))
    return result


def find_tags_quoted(
    text: str,
    start_tag: str,
    end_tag: str,
    quote_chars: Sequence[str] | None = None,
) -> list[TagInfo]:
    """Find regions whose markers lie outside quoted text.

    Quoted spans are computed and indexed once per call; markers inside
    them are skipped. An unterminated quote hides nothing. No nesting
    balance is applied in this variant.

    Args:
        text: Text to scan
        start_tag: Start marker
        end_tag: End marker
        quote_chars: Quote characters. None uses ``ScanConfig.quote_chars``.

    Returns:
        Matches in the order found

    Raises:
        InvalidArgumentError: For empty markers or an empty/invalid quote list

    Examples:
        >>> text = 'a <<X>> "<<Y>>" <<Z>>'
        >>> [t.inner_text for t in find_tags_quoted(text, "<<", ">>", ['"'])]
        ['X', 'Z']
    """
    _require_marker("start_tag", start_tag)
    _require_marker("end_tag", end_tag)
    config = get_scan_config()
    quotes = validate_chars(
        "quote_chars", config.quote_chars if quote_chars is None else quote_chars
    )
    if not quotes:
        raise InvalidArgumentError("quote_chars", "at least one quote character is required")

    header = TagHeader(text, ignore_case=config.ignore_case)
    spans = SpanIndex(count_quotations(text, quotes))
    folded = header.folded
    result = _collect(
        header,
        start_tag,
        end_tag,
        0,
        lambda needle, start: find_outside_ranges(folded, needle, start, spans),
    )

    acc = get_scan_accumulator()
    if acc is not None:
        acc.record_scan(text_length=len(text), match_count=len(result))
    return result
