"""Exception classes for tagscan.

Irregular input (unterminated tags, unterminated quotes, zero matches) is
never an error: it shows up as an empty result or pass-through text. Only
arguments that make a scan meaningless are rejected, eagerly, before any
scanning starts.
"""

from __future__ import annotations


class TagScanError(Exception):
    """Base exception for all tagscan errors."""

    pass


class InvalidArgumentError(TagScanError, ValueError):
    """An argument passed to the scanner API is unusable.

    Raised for empty marker strings, quote or exclusion entries that are not
    a single character, negative start indices and similar misuse.
    """

    def __init__(self, argument: str, message: str) -> None:
        """Initialize with the offending argument name.

        Args:
            argument: Name of the parameter that was rejected
            message: Why it was rejected
        """
        self.argument = argument
        self.message = message
        super().__init__(f"{argument}: {message}")
