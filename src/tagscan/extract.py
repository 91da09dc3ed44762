"""Small extraction helpers built on the Tag Matcher."""

from __future__ import annotations

from tagscan.errors import InvalidArgumentError
from tagscan.scanner import find_tags


def partial_string(text: str, start: int, end: int) -> str:
    """Return ``text[start..end]`` with both bounds inclusive.

    Bounds are clamped to the text; an empty string is returned when
    ``end < start`` after clamping.

    Examples:
        >>> partial_string("abcdef", 1, 3)
        'bcd'
        >>> partial_string("abc", 1, 99)
        'bc'
    """
    if start < 0:
        raise InvalidArgumentError("start", f"must be >= 0, got {start}")
    end = min(end, len(text) - 1)
    if end < start:
        return ""
    return text[start : end + 1]


def extract_between(
    text: str,
    start_marker: str,
    end_marker: str,
    from_index: int = 0,
) -> str:
    """Return the text between the first ``start_marker``/``end_marker`` pair.

    Args:
        text: Text to search
        start_marker: Start marker
        end_marker: End marker
        from_index: Offset to start searching from

    Returns:
        Inner text of the first match, or "" when there is none

    Examples:
        >>> extract_between("public partial class Foo : Bar", "partial class ", ":")
        'Foo '
        >>> extract_between("no markers here", "<", ">")
        ''
    """
    tags = find_tags(text, start_marker, end_marker, from_index, ())
    return tags[0].inner_text if tags else ""
