"""Error-path and malformed input tests.

Malformed input degrades to empty results or pass-through text; only
unusable arguments raise, and they raise InvalidArgumentError.
"""

import pytest

from tagscan import (
    count_quotations,
    divide,
    find_tag_pairs,
    find_tags,
    find_tags_quoted,
    replace_all,
)
from tagscan.errors import InvalidArgumentError, TagScanError
from tagscan.tags import TagHeader, TagInfo

# =========================================================================
# InvalidArgumentError construction and formatting
# =========================================================================


class TestInvalidArgumentError:
    """Verify InvalidArgumentError formatting and hierarchy."""

    def test_message_format(self) -> None:
        err = InvalidArgumentError("start_tag", "must not be empty")
        assert str(err) == "start_tag: must not be empty"
        assert err.argument == "start_tag"
        assert err.message == "must not be empty"

    def test_is_tagscan_error(self) -> None:
        assert isinstance(InvalidArgumentError("x", "y"), TagScanError)

    def test_is_value_error(self) -> None:
        assert isinstance(InvalidArgumentError("x", "y"), ValueError)


# =========================================================================
# TagInfo invariants
# =========================================================================


class TestTagInfoValidation:
    """Hand-built TagInfo values must respect the index invariants."""

    def test_end_before_start_tag_end(self) -> None:
        header = TagHeader("<<a>>")
        with pytest.raises(InvalidArgumentError, match="end_tag_index"):
            TagInfo(header, "<<", 0, ">>", 1)

    def test_end_tag_past_text(self) -> None:
        header = TagHeader("<<a>")
        with pytest.raises(InvalidArgumentError, match="runs past"):
            TagInfo(header, "<<", 0, ">>", 3)

    def test_empty_marker(self) -> None:
        with pytest.raises(InvalidArgumentError, match="start_tag"):
            TagInfo(TagHeader("x"), "", 0, "x", 0)

    def test_negative_start(self) -> None:
        with pytest.raises(InvalidArgumentError, match="start_tag_index"):
            TagInfo(TagHeader("<<a>>"), "<<", -1, ">>", 3)

    def test_valid_hand_built_tag(self) -> None:
        tag = TagInfo(TagHeader("<<a>>"), "<<", 0, ">>", 3)
        assert tag.full_text == "<<a>>"


# =========================================================================
# Malformed input degrades gracefully
# =========================================================================


class TestGracefulDegradation:
    """Irregular text never raises."""

    @pytest.mark.parametrize(
        "text",
        [
            "<<",
            ">>",
            "<<<<>>>>",
            '"<<a>>',
            "<<a>> <<b",
            "{{{{ <<a>> }}",
            "",
        ],
    )
    def test_all_entry_points_tolerate(self, text: str) -> None:
        find_tags(text, "<<", ">>", 0, "{}")
        find_tags_quoted(text, "<<", ">>", ['"'])
        find_tag_pairs(text, [("<<", ">>")])
        count_quotations(text, ['"', "'"])
        segments = divide(text, [("<<", ">>")])
        assert "".join(s.text for s in segments) == text

    def test_replace_on_unrelated_text(self) -> None:
        tag = find_tags("<<a>>", "<<", ">>")[0]
        assert replace_all("", tag, str.upper) == ""
