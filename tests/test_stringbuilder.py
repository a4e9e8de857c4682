"""Tests for StringBuilder."""

from folio.stringbuilder import StringBuilder


class TestStringBuilder:
    """The renderer only appends and builds."""

    def test_append_is_chainable(self) -> None:
        sb = StringBuilder()
        assert sb.append("<li>").append("item").append("</li>") is sb
        assert sb.build() == "<li>item</li>"

    def test_empty_fragments_are_skipped(self) -> None:
        sb = StringBuilder()
        sb.append("").append("a").append("")
        assert sb.build() == "a"

    def test_build_is_repeatable(self) -> None:
        sb = StringBuilder().append("x")
        assert sb.build() == sb.build() == "x"

    def test_empty_builder(self) -> None:
        assert StringBuilder().build() == ""

    def test_only_append_and_build_are_public(self) -> None:
        public = {name for name in dir(StringBuilder) if not name.startswith("_")}
        assert public == {"append", "build"}
