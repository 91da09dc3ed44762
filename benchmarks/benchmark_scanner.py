"""Benchmark the tag scanner on a large generated document.

Run with:
    pytest benchmarks/benchmark_scanner.py -v --benchmark-only
"""

import pytest

from tagscan import divide, find_tags, find_tags_quoted

MARKERS = ("//<Custom>", "//</Custom>")


@pytest.mark.benchmark(group="find-tags")
def test_benchmark_find_tags(benchmark, large_document):
    """Plain scan, no balancing."""
    benchmark(find_tags, large_document, *MARKERS)


@pytest.mark.benchmark(group="find-tags")
def test_benchmark_find_tags_balanced(benchmark, large_document):
    """Scan with brace balancing between the markers."""
    benchmark(find_tags, large_document, *MARKERS, 0, "{}")


@pytest.mark.benchmark(group="find-tags")
def test_benchmark_find_tags_quoted(benchmark, large_document):
    """Quote-aware scan."""
    benchmark(find_tags_quoted, large_document, *MARKERS, ['"'])


@pytest.mark.benchmark(group="divide")
def test_benchmark_divide(benchmark, large_document):
    """Divide the document into custom and generated segments."""
    benchmark(divide, large_document, [MARKERS])
