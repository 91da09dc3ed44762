"""Replace Engine: rewrite marker-bounded regions through a callback.

replace_all re-scans a text with the markers of a previously found TagInfo
and passes each whole region (start marker through end marker) to a
transform. Everything outside the regions is copied verbatim, so an
identity transform returns the input unchanged.

Example:
    >>> from tagscan import find_tags, replace_all
    >>> source = "a //<C>x//</C> b //<C>y//</C>"
    >>> tag = find_tags(source, "//<C>", "//</C>")[0]
    >>> replace_all(source, tag, str.upper)
    'a //<C>X//</C> b //<C>Y//</C>'

"""

from __future__ import annotations

from collections.abc import Callable

from tagscan.config import get_scan_config
from tagscan.errors import InvalidArgumentError
from tagscan.profiling import get_scan_accumulator
from tagscan.stringbuilder import StringBuilder
from tagscan.tags import TagInfo
from tagscan.utils.text import fold_case


def replace_all(text: str, tag: TagInfo, replace: Callable[[str], str]) -> str:
    """Rewrite every region of ``text`` delimited by ``tag``'s markers.

    Markers are matched plainly (no quote awareness, no nesting balance),
    case-insensitively unless the active ScanConfig says otherwise. Scanning
    resumes after each replaced region's end marker.

    Args:
        text: Text to rewrite; need not be the text ``tag`` was found in
        tag: Supplies the start and end markers
        replace: Receives the full region text, returns its replacement

    Returns:
        The rewritten text, or ``text`` itself when nothing matched

    Raises:
        InvalidArgumentError: If ``replace`` is not callable
    """
    if not callable(replace):
        raise InvalidArgumentError("replace", "must be callable")

    ignore_case = get_scan_config().ignore_case
    haystack = fold_case(text) if ignore_case else text
    start_needle = fold_case(tag.start_tag) if ignore_case else tag.start_tag
    end_needle = fold_case(tag.end_tag) if ignore_case else tag.end_tag

    sb = StringBuilder()
    cursor = 0
    replaced = 0
    while True:
        start_idx = haystack.find(start_needle, cursor)
        if start_idx == -1:
            break
        end_idx = haystack.find(end_needle, start_idx + len(tag.start_tag))
        if end_idx == -1:
            break
        region_end = end_idx + len(tag.end_tag)
        sb.append_slice(text, cursor, start_idx)
        sb.append(replace(text[start_idx:region_end]))
        cursor = region_end
        replaced += 1

    acc = get_scan_accumulator()
    if acc is not None:
        acc.record_replace(text_length=len(text), replacement_count=replaced)

    if replaced == 0:
        return text
    sb.append_slice(text, cursor)
    return sb.build()


def replace_inner(tag: TagInfo, new_inner: str) -> str:
    """Return ``tag``'s source text with only this region's inner text replaced.

    The markers and all text outside this one region are kept.

    Example:
        >>> from tagscan import find_tags
        >>> tag = find_tags("id={OLD};", "{", "}")[0]
        >>> replace_inner(tag, "NEW")
        'id={NEW};'
    """
    text = tag.text
    return (
        StringBuilder()
        .append_slice(text, 0, tag.start_tag_end_index)
        .append(new_inner)
        .append_slice(text, tag.end_tag_index)
        .build()
    )
