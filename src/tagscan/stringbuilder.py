"""StringBuilder for O(n) assembly of rewritten text.

The Replace Engine copies untouched stretches of the input and splices in
replacement regions. Appending to a list and joining once keeps that linear
in the size of the output.

Thread Safety:
StringBuilder instances are local to each replace call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> source = "keep [old] keep"
            >>> _ = sb.append_slice(source, 0, 5).append("[new]")
            >>> _ = sb.append_slice(source, 10)
            >>> sb.build()
            'keep [new] keep'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def append_slice(self, source: str, start: int, end: int | None = None) -> StringBuilder:
        """Append ``source[start:end]`` without building it first when empty.

        Returns:
            self for method chaining
        """
        if end is None:
            end = len(source)
        if start < end:
            self._parts.append(source[start:end])
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
