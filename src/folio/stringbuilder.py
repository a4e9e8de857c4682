"""List-backed string accumulator for rendering.

The renderer appends many small fragments; collecting them in a list and
joining once keeps assembly linear in the output size.

Thread Safety:
    Each render() call creates its own StringBuilder.

"""

from __future__ import annotations


class StringBuilder:
    """Collects fragments and joins them once.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.append("<li>").append("item").append("</li>").build()
        '<li>item</li>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append one fragment. Empty strings are skipped."""
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join everything appended so far."""
        return "".join(self._parts)
