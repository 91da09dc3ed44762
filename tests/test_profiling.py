"""Tests for tagscan.profiling: scan profiling API."""

from tagscan import divide, find_tags, replace_all
from tagscan.profiling import (
    ScanAccumulator,
    get_scan_accumulator,
    profiled_scan,
)


class TestGetScanAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_scan_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_scan():
            pass
        assert get_scan_accumulator() is None


class TestProfiledScan:
    def test_yields_accumulator(self) -> None:
        with profiled_scan() as acc:
            assert isinstance(acc, ScanAccumulator)
            assert get_scan_accumulator() is acc

    def test_records_find_tags(self) -> None:
        text = "<<a>> <<b>>"
        with profiled_scan() as acc:
            find_tags(text, "<<", ">>")
        assert acc.scan_calls == 1
        assert acc.chars_scanned == len(text)
        assert acc.match_count == 2

    def test_divide_recorded_once(self) -> None:
        text = "a<x>b</x>c<y>d</y>"
        with profiled_scan() as acc:
            divide(text, [("<x>", "</x>"), ("<y>", "</y>")])
        assert acc.scan_calls == 1
        assert acc.match_count == 2

    def test_records_replacements(self) -> None:
        text = "<<a>> <<b>>"
        tag = find_tags(text, "<<", ">>")[0]
        with profiled_scan() as acc:
            replace_all(text, tag, lambda s: s)
        assert acc.replacement_count == 2
        assert acc.match_count == 0

    def test_total_duration_non_negative(self) -> None:
        with profiled_scan() as acc:
            find_tags("<<a>>", "<<", ">>")
        assert acc.total_duration_ms >= 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = ScanAccumulator().summary()
        assert summary["scan_calls"] == 0
        assert summary["chars_scanned"] == 0
        assert summary["match_count"] == 0
        assert summary["replacement_count"] == 0

    def test_summary_keys(self) -> None:
        with profiled_scan() as acc:
            find_tags("<<a>>", "<<", ">>")
        assert set(acc.summary()) == {
            "total_ms",
            "scan_calls",
            "chars_scanned",
            "match_count",
            "replacement_count",
        }
