"""
tagscan — Tag-delimited text region scanner

Locates, rewrites and splits regions of text bounded by a start marker and
an end marker, such as hand-written code blocks a generator must preserve
across regeneration passes. Handles same-character nesting inside a region
and ignores markers inside quoted text. Pure in-memory functions, zero
runtime dependencies.

Quick Start:
    >>> from tagscan import find_tags, replace_all, divide
    >>> source = "x = 1\\n//<Custom>keep me//</Custom>\\ny = 2"
    >>> tag = find_tags(source, "//<Custom>", "//</Custom>")[0]
    >>> tag.inner_text
    'keep me'

    >>> # Rewrite every region with the same markers
    >>> replace_all(source, tag, lambda region: region.upper())
    'x = 1\\n//<CUSTOM>KEEP ME//</CUSTOM>\\ny = 2'

    >>> # Split into plain and tag segments (joins back to the input)
    >>> [s.is_tag for s in divide(source, [("//<Custom>", "//</Custom>")])]
    [False, True, False]

Nesting and quotes:
    >>> find_tags("BEGIN { END } END", "BEGIN", "END", 0, "{}")[0].end_tag_index
    14
    >>> [t.inner_text for t in find_tags_quoted('<<a>> "<<b>>"', "<<", ">>", '"')]
    ['a']
"""

from tagscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from tagscan.divide import divide
from tagscan.errors import InvalidArgumentError, TagScanError
from tagscan.extract import extract_between, partial_string
from tagscan.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from tagscan.quotes import count_quotations, index_of_without_range
from tagscan.ranges import Range
from tagscan.replace import replace_all, replace_inner
from tagscan.scanner import find_tag_pairs, find_tags, find_tags_quoted
from tagscan.tags import DivideSegment, TagHeader, TagInfo

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Tag Matcher
    "find_tags",
    "find_tag_pairs",
    "find_tags_quoted",
    # Quotation tracking
    "count_quotations",
    "index_of_without_range",
    # Rewriting and splitting
    "replace_all",
    "replace_inner",
    "divide",
    # Extraction helpers
    "extract_between",
    "partial_string",
    # Data model
    "Range",
    "TagHeader",
    "TagInfo",
    "DivideSegment",
    # Errors
    "TagScanError",
    "InvalidArgumentError",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Profiling
    "ScanAccumulator",
    "profiled_scan",
    "get_scan_accumulator",
]
