"""Divider: split text into alternating tag and plain segments.

The segments are contiguous and non-overlapping, and joining their text in
order gives back the input exactly. Generators use this to walk a file,
keeping hand-written regions verbatim while regenerating the rest.

Example:
    >>> from tagscan import divide
    >>> [(s.is_tag, s.text) for s in divide("a<x>b</x>c", [("<x>", "</x>")])]
    [(False, 'a'), (True, '<x>b<'), (False, '/x>c')]

"""

from __future__ import annotations

from tagscan.config import get_scan_config
from tagscan.profiling import get_scan_accumulator
from tagscan.scanner import TagPairs, normalize_tag_pairs, scan_pairs
from tagscan.tags import DivideSegment, TagHeader
from tagscan.utils.logger import get_logger

logger = get_logger(__name__)


def divide(text: str, tags: TagPairs) -> list[DivideSegment]:
    """Partition ``text`` by the regions matched for ``tags``.

    Matches come from the multi-pair matcher and are visited by start
    offset. Each tag segment runs from the first character of its start
    marker through the first character of its end marker; the rest of the
    end marker opens the following plain segment. A match that begins
    inside an earlier tag segment (a nested re-scan) is skipped, so
    segments never overlap.

    Args:
        text: Text to divide
        tags: ``[(start, end), ...]`` or a flat even-length marker list

    Returns:
        Segments in left-to-right order; empty for empty text

    Raises:
        InvalidArgumentError: For malformed pair lists or empty markers
    """
    pairs = normalize_tag_pairs(tags)
    header = TagHeader(text, ignore_case=get_scan_config().ignore_case)
    matches = sorted(scan_pairs(header, pairs), key=lambda t: t.start_tag_index)

    result: list[DivideSegment] = []
    cursor = 0
    for tag in matches:
        if tag.start_tag_index < cursor:
            logger.debug("Skipping nested match %s inside previous segment", tag)
            continue
        if cursor < tag.start_tag_index:
            result.append(
                DivideSegment(
                    start=cursor,
                    end=tag.start_tag_index - 1,
                    text=text[cursor : tag.start_tag_index],
                )
            )
        result.append(
            DivideSegment(
                start=tag.start_tag_index,
                end=tag.end_tag_index,
                text=text[tag.start_tag_index : tag.end_tag_index + 1],
                tag=tag,
            )
        )
        cursor = tag.end_tag_index + 1

    if cursor < len(text):
        result.append(DivideSegment(start=cursor, end=len(text) - 1, text=text[cursor:]))

    acc = get_scan_accumulator()
    if acc is not None:
        acc.record_scan(text_length=len(text), match_count=sum(s.is_tag for s in result))
    return result
