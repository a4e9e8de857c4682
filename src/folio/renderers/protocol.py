"""DocumentRenderer protocol — stable interface for document renderers.

Any renderer that implements ``render(document) -> str`` conforms to this
protocol. ``HtmlRenderer`` is the reference implementation.

Example:
    from folio.renderers.protocol import DocumentRenderer

    def publish(renderer: DocumentRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from folio.nodes import Document


class DocumentRenderer(Protocol):
    """Protocol for document renderers."""

    def render(self, document: Document) -> str:
        """Render a Document to a string.

        Args:
            document: The document tree to render.

        Returns:
            Rendered page.

        """
        ...
