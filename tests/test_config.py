"""Tests for ContextVar-based scan configuration.

Validates defaults, from_dict(), thread isolation and context manager
behavior, and that scanner entry points pick the active config up.
"""

from concurrent.futures import ThreadPoolExecutor
from threading import Thread

import pytest

from tagscan import (
    ScanConfig,
    find_tags,
    find_tags_quoted,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)


class TestScanConfigDataclass:
    """ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.ignore_case is True
        assert config.quote_chars == ('"',)
        assert config.exclude_chars == ()

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.ignore_case = False  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert hash(ScanConfig()) == hash(ScanConfig())


class TestScanConfigFromDict:
    """ScanConfig.from_dict() factory."""

    def test_basic(self) -> None:
        config = ScanConfig.from_dict({"ignore_case": False})
        assert config.ignore_case is False
        assert config.quote_chars == ('"',)

    def test_lists_become_tuples(self) -> None:
        config = ScanConfig.from_dict({"quote_chars": ['"', "'"], "exclude_chars": ["{", "}"]})
        assert config.quote_chars == ('"', "'")
        assert config.exclude_chars == ("{", "}")

    def test_unknown_keys_ignored(self) -> None:
        config = ScanConfig.from_dict({"ignore_case": True, "unknown_key": 42})
        assert config == ScanConfig()

    def test_empty(self) -> None:
        assert ScanConfig.from_dict({}) == ScanConfig()


class TestContextVarFunctions:
    """get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_scan_config()

    def test_default_config(self) -> None:
        assert get_scan_config() == ScanConfig()

    def test_set_and_get(self) -> None:
        custom = ScanConfig(ignore_case=False)
        set_scan_config(custom)
        assert get_scan_config() is custom

    def test_reset(self) -> None:
        set_scan_config(ScanConfig(ignore_case=False))
        reset_scan_config()
        assert get_scan_config().ignore_case is True


class TestScanConfigContext:
    """scan_config_context() context manager."""

    def test_restores_previous(self) -> None:
        with scan_config_context(ScanConfig(ignore_case=False)):
            assert get_scan_config().ignore_case is False
        assert get_scan_config().ignore_case is True

    def test_restores_after_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig(ignore_case=False)):
                raise RuntimeError("boom")
        assert get_scan_config().ignore_case is True

    def test_nested(self) -> None:
        outer = ScanConfig(quote_chars=("'",))
        inner = ScanConfig(ignore_case=False)
        with scan_config_context(outer):
            with scan_config_context(inner):
                assert get_scan_config() is inner
            assert get_scan_config() is outer


class TestConfigAffectsScanning:
    """Scanner entry points read the active config."""

    def test_case_sensitive_scan(self) -> None:
        text = "<A>x</A> <a>y</a>"
        with scan_config_context(ScanConfig(ignore_case=False)):
            tags = find_tags(text, "<a>", "</a>")
        assert [t.inner_text for t in tags] == ["y"]

    def test_quote_chars_default(self) -> None:
        text = "'<<a>>' <<b>>"
        with scan_config_context(ScanConfig(quote_chars=("'",))):
            tags = find_tags_quoted(text, "<<", ">>")
        assert [t.inner_text for t in tags] == ["b"]


class TestThreadIsolation:
    """Config set in one thread is invisible to others."""

    def test_each_thread_sees_its_own_config(self) -> None:
        results: dict[int, tuple[str, ...]] = {}

        def worker(thread_id: int, config: ScanConfig) -> None:
            set_scan_config(config)
            results[thread_id] = get_scan_config().quote_chars

        configs = [ScanConfig(quote_chars=("'",)), ScanConfig(quote_chars=('"', "`"))]
        threads = [Thread(target=worker, args=(i, c)) for i, c in enumerate(configs)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results[0] == ("'",)
        assert results[1] == ('"', "`")
        assert get_scan_config() == ScanConfig()

    def test_concurrent_threads_use_own_config(self) -> None:
        text = "<A>upper</A> <a>lower</a>"

        def scan(ignore_case: bool) -> list[str]:
            with scan_config_context(ScanConfig(ignore_case=ignore_case)):
                return [t.inner_text for t in find_tags(text, "<a>", "</a>")]

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(scan, [True, False] * 10))

        for ignore_case, inner in zip([True, False] * 10, results):
            assert inner == (["upper", "lower"] if ignore_case else ["lower"])
