"""Matched-region types produced by the scanner.

One scan call creates a single TagHeader for the input text and shares it
by reference among every TagInfo it returns. The Divider turns a scan into
DivideSegment values that cover the input end to end.

Thread Safety:
All types are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from tagscan.errors import InvalidArgumentError
from tagscan.utils.text import fold_case


@dataclass(frozen=True, slots=True)
class TagHeader:
    """Read-only context shared by all matches of one scan.

    Holds the scanned text and, when ``ignore_case`` is set, a case-folded
    copy of the same length that all marker lookups run against.

    Attributes:
        text: The scanned input
        ignore_case: Whether marker comparison folds case
        folded: Text used for marker lookups (computed)

    """

    text: str
    ignore_case: bool = True
    folded: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "folded", self.fold(self.text))

    def fold(self, value: str) -> str:
        """Fold ``value`` the same way the header text was folded."""
        return fold_case(value) if self.ignore_case else value


@dataclass(frozen=True, slots=True)
class TagInfo:
    """One matched region bounded by a start marker and an end marker.

    Indices are zero-based offsets into ``header.text``. ``end_tag_index``
    points at the first character of the end marker.

    Attributes:
        header: Shared scan context holding the source text
        start_tag: Start marker as passed to the scanner
        start_tag_index: Offset of the start marker
        end_tag: End marker as passed to the scanner
        end_tag_index: Offset of the end marker

    Examples:
        >>> from tagscan import find_tags
        >>> tag = find_tags("x <b>2</b> y", "<b>", "</b>")[0]
        >>> tag.full_text, tag.inner_text
        ('<b>2</b>', '2')
        >>> tag.start_index, tag.end_index
        (2, 10)

    """

    header: TagHeader
    start_tag: str
    start_tag_index: int
    end_tag: str
    end_tag_index: int

    def __post_init__(self) -> None:
        if not self.start_tag:
            raise InvalidArgumentError("start_tag", "must not be empty")
        if not self.end_tag:
            raise InvalidArgumentError("end_tag", "must not be empty")
        if self.start_tag_index < 0:
            raise InvalidArgumentError(
                "start_tag_index", f"must be >= 0, got {self.start_tag_index}"
            )
        if self.start_tag_end_index > self.end_tag_index:
            raise InvalidArgumentError(
                "end_tag_index",
                f"must be >= {self.start_tag_end_index} (end of start tag), "
                f"got {self.end_tag_index}",
            )
        if self.end_tag_end_index > len(self.header.text):
            raise InvalidArgumentError(
                "end_tag_index",
                f"end tag runs past the text (length {len(self.header.text)})",
            )

    @property
    def text(self) -> str:
        """The scanned source text."""
        return self.header.text

    @property
    def start_tag_end_index(self) -> int:
        """Offset just past the start marker."""
        return self.start_tag_index + len(self.start_tag)

    @property
    def end_tag_end_index(self) -> int:
        """Offset just past the end marker."""
        return self.end_tag_index + len(self.end_tag)

    @property
    def start_index(self) -> int:
        """First offset of the whole region (same as start_tag_index)."""
        return self.start_tag_index

    @property
    def end_index(self) -> int:
        """Offset just past the whole region (exclusive)."""
        return self.end_tag_end_index

    @property
    def full_text(self) -> str:
        """Region text from the start marker through the end marker."""
        return self.header.text[self.start_tag_index : self.end_tag_end_index]

    @property
    def inner_text(self) -> str:
        """Region text between the two markers."""
        return self.header.text[self.start_tag_end_index : self.end_tag_index]

    def __str__(self) -> str:
        return f"{self.start_tag!r}@{self.start_tag_index}..{self.end_tag!r}@{self.end_tag_index}"


@dataclass(frozen=True, slots=True)
class DivideSegment:
    """A contiguous slice of the input produced by the Divider.

    Attributes:
        start: First offset of the slice
        end: Last offset of the slice (inclusive)
        text: The slice itself
        tag: Matched region for tag segments, None for plain text

    """

    start: int
    end: int
    text: str
    tag: TagInfo | None = None

    @property
    def is_tag(self) -> bool:
        """True when this segment is a matched tag region."""
        return self.tag is not None
