"""Folio renderers.

Renderers turn a Document tree into an output page.

Available Renderers:
- HtmlRenderer: Renders a Document to a self-contained HTML page

Thread Safety:
Per-render state lives in a RenderContext local to each render() call.
Safe for concurrent use from multiple threads.

"""

from folio.renderers.html import HtmlRenderer, RenderContext, has_header_row
from folio.renderers.protocol import DocumentRenderer

__all__ = ["DocumentRenderer", "HtmlRenderer", "RenderContext", "has_header_row"]
