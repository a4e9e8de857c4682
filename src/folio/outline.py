"""Chapter numbering and document outline.

Chapter numbers are never stored on the nodes. They are derived from the
position of a chapter among its siblings (1-based), joined to the parent's
number with ".": the second sub-chapter of the third top-level chapter is
"3.2".

Example:
    >>> for info in walk_chapters(doc):
    ...     print(info.number, info.title)
    1 Introduction
    2 Design
    2.1 Goals

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

from collections.abc import Iterator
from dataclasses import dataclass

from folio.nodes import Chapter, Document
from folio.utils.text import anchor_id


@dataclass(frozen=True, slots=True)
class ChapterInfo:
    """Chapter metadata as it appears in the rendered output.

    Attributes:
        number: Dotted section number, e.g. "2.3.1"
        level: Heading level stored on the chapter
        title: Chapter title
        anchor: HTML id of the chapter heading
        depth: Nesting depth, 1 for top-level chapters

    """

    number: str
    level: int
    title: str
    anchor: str
    depth: int


def chapter_number(parent: str | None, position: int) -> str:
    """Number of the chapter at 1-based ``position`` under ``parent``.

    Top-level chapters (``parent`` is None) are numbered by position alone.
    """
    if parent is None:
        return str(position)
    return f"{parent}.{position}"


def numbered(
    chapters: tuple[Chapter, ...], parent: str | None = None
) -> Iterator[tuple[str, Chapter]]:
    """Pair each chapter with its number, in sibling order."""
    for position, chapter in enumerate(chapters, start=1):
        yield chapter_number(parent, position), chapter


def walk_chapters(document: Document) -> Iterator[ChapterInfo]:
    """Yield every chapter of ``document`` depth-first, in output order."""
    yield from _walk(document.chapters, None, 1)


def _walk(
    chapters: tuple[Chapter, ...], parent: str | None, depth: int
) -> Iterator[ChapterInfo]:
    for number, chapter in numbered(chapters, parent):
        yield ChapterInfo(
            number=number,
            level=chapter.level,
            title=chapter.title,
            anchor=anchor_id(chapter.title),
            depth=depth,
        )
        yield from _walk(chapter.chapters, number, depth + 1)


__all__ = ["ChapterInfo", "chapter_number", "numbered", "walk_chapters"]
