"""Concurrent renders sharing one HtmlRenderer."""

from concurrent.futures import ThreadPoolExecutor

from folio.nodes import Chapter, Document, ReferenceEntry, References
from folio.renderers.html import HtmlRenderer


def _doc(i: int) -> Document:
    return Document(
        title=f"doc{i}",
        chapters=(Chapter(level=1, title="Bibliography", content=(References(),)),),
        references=(ReferenceEntry(name=f"name{i}", url=f"http://host/{i}"),),
    )


class TestConcurrentRender:
    def test_each_render_sees_only_its_document(self) -> None:
        renderer = HtmlRenderer()
        docs = [_doc(i) for i in range(40)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(renderer.render, docs))

        for i, html in enumerate(results):
            assert f'<a href="http://host/{i}">name{i} (http://host/{i})</a>' in html
            assert html.count("http://host/") == 2

    def test_matches_sequential_output(self) -> None:
        renderer = HtmlRenderer()
        docs = [_doc(i) for i in range(10)]
        sequential = [renderer.render(d) for d in docs]

        with ThreadPoolExecutor(max_workers=4) as pool:
            concurrent = list(pool.map(renderer.render, docs))

        assert concurrent == sequential

    def test_get_chapters_after_concurrent_renders(self) -> None:
        """The kept outline belongs to one complete render, never a mix."""
        from folio.outline import walk_chapters

        renderer = HtmlRenderer()
        docs = [
            Document(
                title=f"doc{i}",
                chapters=tuple(Chapter(level=1, title=f"d{i}c{j}") for j in range(5)),
            )
            for i in range(20)
        ]

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(renderer.render, docs))

        outlines = [list(walk_chapters(d)) for d in docs]
        assert renderer.get_chapters() in outlines
