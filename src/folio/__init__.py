"""
Folio — chaptered documents to a single HTML page.

Renders an already-built document tree (chapters, paragraphs, lists,
tables, code and citations) into one self-contained HTML page with
numbered sections, self-linking headings and an inline stylesheet.

Quick Start:
    >>> from folio import Chapter, Document, Text, render
    >>> doc = Document(
    ...     title="Notes",
    ...     chapters=(Chapter(level=1, title="Intro", content=(Text(("Hi",)),)),),
    ... )
    >>> html = render(doc)
    >>> '<h1 data-number="1" id="Intro">' in html
    True

Configuration:
    >>> from folio import HtmlRenderer, RenderConfig
    >>> renderer = HtmlRenderer(RenderConfig(build_toc=True))
    >>> html = renderer.render(doc)
"""

from folio.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from folio.errors import ConfigError, FolioError, RenderError
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
    ReferenceEntry,
    References,
    Span,
    Table,
    Text,
)
from folio.outline import ChapterInfo, walk_chapters
from folio.renderers.html import HtmlRenderer, has_header_row
from folio.renderers.protocol import DocumentRenderer
from folio.utils.text import anchor_id, escape_text

__version__ = "0.1.0"


def render(document: Document, *, config: RenderConfig | None = None) -> str:
    """Render a Document to an HTML page.

    Args:
        document: Document tree to render
        config: Render configuration (defaults to the current context's)

    Returns:
        HTML string

    Example:
        >>> html = render(Document(title="Empty"))
        >>> html.endswith("</body></html>\\n")
        True
    """
    return HtmlRenderer(config).render(document)


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "render",
    # Structure nodes
    "Chapter",
    "Document",
    "ReferenceEntry",
    # Inline nodes
    "Span",
    "Text",
    "CodeSpan",
    "Deletion",
    "Identifier",
    "Insertion",
    "Reference",
    # Block nodes
    "Block",
    "Content",
    "Code",
    "IdentifierDefinition",
    "List",
    "OrderedList",
    "References",
    "TOC",
    "Table",
    # Renderer
    "HtmlRenderer",
    "DocumentRenderer",
    "has_header_row",
    # Outline
    "ChapterInfo",
    "walk_chapters",
    # Text helpers
    "anchor_id",
    "escape_text",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "FolioError",
    "RenderError",
    "ConfigError",
]
