"""Typed document nodes for Folio.

All nodes are frozen dataclasses with slots:
- Immutability: the renderer never mutates its input, and a tree can be
  shared across threads
- Pattern matching: ``match`` statements dispatch on the node classes
- Closed variant set: ``Span``, ``Block`` and ``Content`` are type aliases
  over a fixed list of classes, so a type checker flags unhandled variants

Node Hierarchy:
Document
├── content: Text | Block
│   ├── Text (sequence of spans)
│   │   ├── str (plain text)
│   │   ├── Insertion
│   │   ├── Deletion
│   │   ├── Identifier
│   │   ├── CodeSpan
│   │   └── Reference
│   ├── Code
│   ├── List
│   ├── OrderedList
│   ├── Table
│   ├── References (marker)
│   ├── TOC (marker)
│   └── IdentifierDefinition (marker)
├── chapters: Chapter (recursive)
└── references: ReferenceEntry

Chapters carry no number. Numbers are derived from sibling position while
rendering (see :mod:`folio.outline`).

"""

from __future__ import annotations

from dataclasses import dataclass

# =============================================================================
# Inline spans
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Ordered run of inline spans.

    A bare Text inside chapter content renders as a paragraph.

    """

    spans: tuple[Span, ...] = ()


@dataclass(frozen=True, slots=True)
class Insertion:
    """Text marked as added.

    HTML: <span class="new">text</span>

    """

    text: Text


@dataclass(frozen=True, slots=True)
class Deletion:
    """Text marked as removed.

    HTML: <span class="delete">text</span>

    """

    text: Text


@dataclass(frozen=True, slots=True)
class Identifier:
    """Semantic identifier, rendered verbatim.

    HTML: <span class="identifier">name</span>

    """

    text: str


@dataclass(frozen=True, slots=True)
class CodeSpan:
    """Inline code, rendered verbatim.

    HTML: <span class="code">code</span>

    """

    text: str


@dataclass(frozen=True, slots=True)
class Reference:
    """Numbered citation link.

    HTML: <a href="url">[index]</a>

    """

    index: int
    url: str


# PEP 695 type alias for inline spans
type Span = str | Insertion | Deletion | Identifier | CodeSpan | Reference


# =============================================================================
# Block elements
# =============================================================================


@dataclass(frozen=True, slots=True)
class Code:
    """Preformatted code block, body rendered verbatim."""

    body: str


@dataclass(frozen=True, slots=True)
class List:
    """Unordered list of text entries."""

    entries: tuple[Text, ...] = ()


@dataclass(frozen=True, slots=True)
class OrderedList:
    """Ordered list of text entries."""

    entries: tuple[Text, ...] = ()


@dataclass(frozen=True, slots=True)
class Table:
    """Table of text cells.

    There is no header flag. A header is inferred at render time when the
    second row is a separator row (every cell exactly ``-``).

    """

    rows: tuple[tuple[Text, ...], ...] = ()


@dataclass(frozen=True, slots=True)
class References:
    """Marker: renders the document's reference list."""


@dataclass(frozen=True, slots=True)
class TOC:
    """Marker: renders the table of contents."""


@dataclass(frozen=True, slots=True)
class IdentifierDefinition:
    """Marker: named anchor target for an identifier."""

    name: str


# PEP 695 type alias for block elements
type Block = Code | List | OrderedList | Table | References | TOC | IdentifierDefinition

# Anything that may appear in document or chapter content
type Content = Text | Block


# =============================================================================
# Structure
# =============================================================================


@dataclass(frozen=True, slots=True)
class ReferenceEntry:
    """One entry of the document-wide reference list."""

    name: str
    url: str


@dataclass(frozen=True, slots=True)
class Chapter:
    """Numbered section, recursively nestable.

    ``level`` selects the heading tag (``h1``, ``h2``, ...). It is stored,
    not derived from nesting depth.

    """

    level: int
    title: str
    content: tuple[Content, ...] = ()
    chapters: tuple[Chapter, ...] = ()


@dataclass(frozen=True, slots=True)
class Document:
    """Root document node.

    ``references`` is visible to every ``References`` marker in the tree
    during a render.

    """

    title: str
    content: tuple[Content, ...] = ()
    chapters: tuple[Chapter, ...] = ()
    references: tuple[ReferenceEntry, ...] = ()
