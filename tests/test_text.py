"""Tests for anchor ids and text escaping."""

import re

from hypothesis import given
from hypothesis import strategies as st

from folio.utils.text import anchor_id, escape_text

ANCHOR_SAFE = re.compile(r"[A-Za-z0-9_-]*")


class TestAnchorId:
    """Tests for anchor_id."""

    def test_plus_and_space(self) -> None:
        assert anchor_id("C++ Basics") == "Cpp-Basics"

    def test_allowed_characters_pass_through(self) -> None:
        assert anchor_id("Abc_09-x") == "Abc_09-x"

    def test_punctuation(self) -> None:
        assert anchor_id("std::vector<T>") == "std--vector-T-"
        assert anchor_id("a.b/c") == "a-b-c"

    def test_case_preserved(self) -> None:
        assert anchor_id("MixedCase") == "MixedCase"

    def test_non_ascii_replaced_per_character(self) -> None:
        assert anchor_id("Über") == "-ber"

    def test_empty(self) -> None:
        assert anchor_id("") == ""

    @given(st.text())
    def test_idempotent(self, title: str) -> None:
        once = anchor_id(title)
        assert anchor_id(once) == once

    @given(st.text())
    def test_only_safe_characters(self, title: str) -> None:
        result = anchor_id(title)
        assert ANCHOR_SAFE.fullmatch(result)
        assert len(result) == len(title)


class TestEscapeText:
    """Tests for escape_text."""

    def test_all_occurrences(self) -> None:
        assert escape_text("a<b>c<d") == "a&lt;b&gt;c&lt;d"

    def test_adjacent(self) -> None:
        assert escape_text("<<>>") == "&lt;&lt;&gt;&gt;"

    def test_leaves_other_characters(self) -> None:
        assert escape_text("&amp; \"q\" 'q'") == "&amp; \"q\" 'q'"

    def test_empty(self) -> None:
        assert escape_text("") == ""

    @given(st.text())
    def test_no_brackets_survive(self, text: str) -> None:
        result = escape_text(text)
        assert "<" not in result
        assert ">" not in result
        assert result.count("&lt;") == text.count("<") + text.count("&lt;")
        assert result.count("&gt;") == text.count(">") + text.count("&gt;")
