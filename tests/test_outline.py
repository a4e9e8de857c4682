"""Tests for chapter numbering helpers."""

from folio.nodes import Chapter, Document
from folio.outline import ChapterInfo, chapter_number, numbered, walk_chapters


class TestChapterNumber:
    def test_top_level(self) -> None:
        assert chapter_number(None, 1) == "1"
        assert chapter_number(None, 12) == "12"

    def test_nested(self) -> None:
        assert chapter_number("2", 3) == "2.3"
        assert chapter_number("2.3", 1) == "2.3.1"


class TestNumbered:
    def test_positions_are_one_based(self) -> None:
        chapters = (Chapter(level=1, title="a"), Chapter(level=1, title="b"))
        assert [n for n, _ in numbered(chapters)] == ["1", "2"]
        assert [n for n, _ in numbered(chapters, "4")] == ["4.1", "4.2"]

    def test_empty(self) -> None:
        assert list(numbered(())) == []


class TestWalkChapters:
    def test_depth_first_order(self) -> None:
        doc = Document(
            title="T",
            chapters=(
                Chapter(level=1, title="One"),
                Chapter(
                    level=1,
                    title="Two",
                    chapters=(Chapter(level=2, title="Two a"), Chapter(level=2, title="Two b")),
                ),
            ),
        )
        infos = list(walk_chapters(doc))
        assert [i.number for i in infos] == ["1", "2", "2.1", "2.2"]
        assert infos[2] == ChapterInfo(
            number="2.1", level=2, title="Two a", anchor="Two-a", depth=2
        )

    def test_level_is_stored_not_derived(self) -> None:
        doc = Document(title="T", chapters=(Chapter(level=3, title="x"),))
        (info,) = walk_chapters(doc)
        assert info.level == 3
        assert info.depth == 1

    def test_matches_renderer(self) -> None:
        from folio.renderers.html import HtmlRenderer

        doc = Document(
            title="T",
            chapters=(
                Chapter(level=1, title="A", chapters=(Chapter(level=2, title="B"),)),
                Chapter(level=1, title="C"),
            ),
        )
        renderer = HtmlRenderer()
        renderer.render(doc)
        assert renderer.get_chapters() == list(walk_chapters(doc))
