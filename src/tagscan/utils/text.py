"""Case folding that keeps character offsets stable.

``str.lower()`` can change the length of a string ("İ" lowers to two code
points), which would shift every index reported by the scanner. Folding one
character at a time and keeping characters whose lower-case form is longer
than one code point guarantees ``len(fold_case(s)) == len(s)``.

Example:
    >>> from tagscan.utils.text import fold_case
    >>> fold_case("<Region>")
    '<region>'
"""

from __future__ import annotations


def _fold_char(ch: str) -> str:
    lowered = ch.lower()
    return lowered if len(lowered) == 1 else ch


def fold_case(text: str) -> str:
    """Lower-case text without changing its length.

    Args:
        text: Text to fold

    Returns:
        Folded text; index ``i`` in the result corresponds to index ``i``
        in the input.

    Examples:
        >>> fold_case("BEGIN Block")
        'begin block'
        >>> len(fold_case("İstanbul")) == len("İstanbul")
        True
    """
    if text.isascii():
        return text.lower()
    return "".join(_fold_char(ch) for ch in text)
