"""HTML renderer using StringBuilder pattern.

Renders a Document tree into one self-contained HTML page: fixed head
boilerplate, the title, the top-level content, every chapter with its
computed section number, and the fixed footer.

Thread Safety:
All per-render state, including the document that ``References`` markers
resolve against, lives in a RenderContext created fresh for each render()
call and passed down explicitly. Nothing is stored in a module-level slot,
so one HtmlRenderer can be shared between threads and renders never see
each other's documents.

Table Headers:
Tables carry no header flag. Row 0 is a header only when the table has at
least three rows and row 1 is a separator row (every cell exactly "-").
The separator row itself is never rendered.
"""

from dataclasses import dataclass, field
from typing import assert_never

from folio.config import RenderConfig, get_render_config
from folio.errors import RenderError
from folio.nodes import (
    TOC,
    Block,
    Chapter,
    Code,
    CodeSpan,
    Content,
    Deletion,
    Document,
    Identifier,
    IdentifierDefinition,
    Insertion,
    List,
    OrderedList,
    Reference,
    References,
    Span,
    Table,
    Text,
)
from folio.outline import ChapterInfo, numbered
from folio.stringbuilder import StringBuilder
from folio.utils.logger import get_logger
from folio.utils.text import anchor_id, escape_text

logger = get_logger(__name__)

SEPARATOR_CELL = "-"


def has_header_row(table: Table) -> bool:
    """Whether row 0 of ``table`` is a header row.

    True only for tables of three or more rows whose second row consists
    entirely of cells holding exactly one plain ``"-"`` span. Only row
    index 1 is inspected; a separator anywhere else does not count.
    """
    if len(table.rows) < 3:
        return False
    return all(_is_separator_cell(cell) for cell in table.rows[1])


def _is_separator_cell(cell: Text) -> bool:
    if len(cell.spans) != 1:
        return False
    span = cell.spans[0]
    return isinstance(span, str) and span == SEPARATOR_CELL


@dataclass(slots=True)
class RenderContext:
    """Per-render state.

    Created fresh for each render() call and dropped when it returns or
    raises, so a document's references never outlive its render.

    Attributes:
        document: Document being rendered; None when rendering a detached
            fragment
        chapters: Chapters emitted so far, in output order
    """

    document: Document | None = None
    chapters: list[ChapterInfo] = field(default_factory=list)


class HtmlRenderer:
    """Render a Document tree to an HTML page.

    Usage:
        >>> renderer = HtmlRenderer()
        >>> html = renderer.render(doc)
        >>> renderer.get_chapters()[0].number
        '1'

    Thread Safety:
        The renderer holds only its immutable config between calls. Each
        render() creates an independent RenderContext. The exception is the
        outline kept for get_chapters(): every completed render() replaces
        it without a lock, so with concurrent renders it belongs to
        whichever finished last. Use walk_chapters() per document instead.
    """

    __slots__ = ("_config", "_last_context")

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Render configuration. Defaults to the configuration of
                the current context (see folio.config).
        """
        self._config = config if config is not None else get_render_config()
        self._last_context: RenderContext | None = None

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, document: Document) -> str:
        """Render a complete HTML page for ``document``.

        Args:
            document: Document root

        Returns:
            HTML string, boilerplate included
        """
        ctx = RenderContext(document=document)
        config = self._config

        sb = StringBuilder()
        sb.append(config.header_open)
        sb.append(document.title)
        sb.append(config.header_close)
        sb.append(f'<h1 class="title" style="text-align:center">{document.title}</h1>')

        for item in document.content:
            self._render_content(item, sb, ctx)

        for number, chapter in numbered(document.chapters):
            self._render_chapter(chapter, number, sb, ctx)

        sb.append(config.footer)

        # Only a completed render replaces the collected outline
        self._last_context = ctx

        html = sb.build()
        logger.debug(
            "Rendered document %r: %d chapters, %d characters",
            document.title,
            len(ctx.chapters),
            len(html),
        )
        return html

    def render_chapter(
        self, chapter: Chapter, number: str, document: Document | None = None
    ) -> str:
        """Render one chapter and its sub-chapters as a fragment.

        Args:
            chapter: Chapter to render
            number: Section number to assign, e.g. "2" or "3.1"
            document: Document supplying the reference list for any
                ``References`` marker inside the chapter

        Raises:
            RenderError: The chapter contains a References or TOC marker
                that needs ``document`` and none was given
        """
        sb = StringBuilder()
        self._render_chapter(chapter, number, sb, RenderContext(document=document))
        return sb.build()

    def render_block(self, block: Block, document: Document | None = None) -> str:
        """Render a single block element as a fragment.

        Raises:
            RenderError: ``block`` needs the document (References, or TOC
                with ``build_toc``) and ``document`` is None
        """
        sb = StringBuilder()
        self._render_block(block, sb, RenderContext(document=document))
        return sb.build()

    def render_text(self, text: Text) -> str:
        """Render the inline spans of ``text`` without a paragraph wrapper."""
        sb = StringBuilder()
        self._render_spans(text.spans, sb)
        return sb.build()

    def get_chapters(self) -> list[ChapterInfo]:
        """Chapters emitted by the last completed render() call.

        Returns:
            ChapterInfo list in output order. Empty if render() has not
            completed yet.

        Note:
            Reflects the most recent render on this instance. With a renderer
            shared across threads, use walk_chapters() instead.
        """
        if self._last_context is None:
            return []
        return self._last_context.chapters.copy()

    # =========================================================================
    # Structure
    # =========================================================================

    def _render_chapter(
        self, chapter: Chapter, number: str, sb: StringBuilder, ctx: RenderContext
    ) -> None:
        """Render heading, content, then sub-chapters numbered under ``number``."""
        anchor = anchor_id(chapter.title)
        level = chapter.level

        ctx.chapters.append(
            ChapterInfo(
                number=number,
                level=level,
                title=chapter.title,
                anchor=anchor,
                depth=number.count(".") + 1,
            )
        )

        sb.append(f'<h{level} data-number="{number}" id="{anchor}">')
        sb.append(f'<span class="header-section-number">{number}</span> ')
        sb.append(chapter.title)
        sb.append(f'<a href="#{anchor}" class="self-link"></a></h{level}>')

        for item in chapter.content:
            self._render_content(item, sb, ctx)

        for sub_number, sub in numbered(chapter.chapters, number):
            self._render_chapter(sub, sub_number, sb, ctx)

    def _render_content(self, item: Content, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render a content item; bare text becomes a paragraph."""
        match item:
            case Text():
                sb.append("<p>")
                self._render_spans(item.spans, sb)
                sb.append("</p>")
            case _:
                self._render_block(item, sb, ctx)

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render a block element."""
        match block:
            case Code():
                sb.append('<code><span class="code">')
                sb.append(block.body)
                sb.append("</span></code>")
            case List():
                self._render_list("ul", block.entries, sb)
            case OrderedList():
                self._render_list("ol", block.entries, sb)
            case Table():
                self._render_table(block, sb)
            case References():
                self._render_references(block, sb, ctx)
            case TOC():
                self._render_toc(block, sb, ctx)
            case IdentifierDefinition():
                self._render_identifier_definition(block, sb)
            case _:
                assert_never(block)

    def _render_list(self, tag: str, entries: tuple[Text, ...], sb: StringBuilder) -> None:
        sb.append(f"<{tag}>")
        for entry in entries:
            sb.append("<li>")
            self._render_spans(entry.spans, sb)
            sb.append("</li>")
        sb.append(f"</{tag}>")

    def _render_table(self, table: Table, sb: StringBuilder) -> None:
        """Render table, inferring a header from a separator row."""
        sb.append("<table>")

        first_body_row = 0
        if has_header_row(table):
            sb.append("<thead><tr>")
            for cell in table.rows[0]:
                sb.append("<th>")
                self._render_spans(cell.spans, sb)
                sb.append("</th>")
            sb.append("</tr></thead>")
            first_body_row = 2

        sb.append("<tbody>")
        for row in table.rows[first_body_row:]:
            sb.append("<tr>")
            for cell in row:
                sb.append("<td>")
                self._render_spans(cell.spans, sb)
                sb.append("</td>")
            sb.append("</tr>")
        sb.append("</tbody></table>")

    def _render_references(
        self, marker: References, sb: StringBuilder, ctx: RenderContext
    ) -> None:
        """Render the document's reference list as an ordered list."""
        if ctx.document is None:
            raise RenderError("no document to resolve the reference list against", marker)

        sb.append("<ol>")
        for entry in ctx.document.references:
            sb.append(f'<li><a href="{entry.url}">{entry.name} ({entry.url})</a></li>')
        sb.append("</ol>")

    def _render_toc(self, marker: TOC, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render the table of contents, or the placeholder when disabled."""
        if not self._config.build_toc:
            logger.debug("TOC marker left as placeholder")
            sb.append(self._config.placeholder)
            return
        if ctx.document is None:
            raise RenderError("no document to build the table of contents from", marker)

        sb.append('<nav class="toc">')
        self._render_toc_level(ctx.document.chapters, None, sb)
        sb.append("</nav>")

    def _render_toc_level(
        self, chapters: tuple[Chapter, ...], parent: str | None, sb: StringBuilder
    ) -> None:
        if not chapters:
            return
        sb.append("<ul>")
        for number, chapter in numbered(chapters, parent):
            sb.append(f'<li><a href="#{anchor_id(chapter.title)}">')
            sb.append(f'<span class="header-section-number">{number}</span> ')
            sb.append(chapter.title)
            sb.append("</a>")
            self._render_toc_level(chapter.chapters, number, sb)
            sb.append("</li>")
        sb.append("</ul>")

    def _render_identifier_definition(
        self, marker: IdentifierDefinition, sb: StringBuilder
    ) -> None:
        if self._config.anchor_definitions:
            sb.append(f'<a id="{anchor_id(marker.name)}"></a>')
            return
        logger.debug("IdentifierDefinition %r left as placeholder", marker.name)
        sb.append(self._config.placeholder)

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_spans(self, spans: tuple[Span, ...], sb: StringBuilder) -> None:
        """Render a sequence of spans, in order, without separators."""
        for span in spans:
            self._render_span(span, sb)

    def _render_span(self, span: Span, sb: StringBuilder) -> None:
        """Render one inline span."""
        match span:
            case str():
                sb.append(escape_text(span))
            case Insertion():
                sb.append('<span class="new">')
                self._render_spans(span.text.spans, sb)
                sb.append("</span>")
            case Deletion():
                sb.append('<span class="delete">')
                self._render_spans(span.text.spans, sb)
                sb.append("</span>")
            case Identifier():
                sb.append(f'<span class="identifier">{span.text}</span>')
            case CodeSpan():
                sb.append(f'<span class="code">{span.text}</span>')
            case Reference():
                sb.append(f'<a href="{span.url}">[{span.index}]</a>')
            case _:
                assert_never(span)
