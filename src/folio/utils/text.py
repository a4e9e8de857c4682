"""Text processing utilities for Folio.

Example:
    >>> from folio.utils.text import anchor_id, escape_text
    >>> anchor_id("C++ Basics")
    'Cpp-Basics'
    >>> escape_text("a<b>c")
    'a&lt;b&gt;c'
"""

from __future__ import annotations

import re

# Any character outside the anchor-safe set
_DISALLOWED_ID_CHAR = re.compile(r"[^A-Za-z0-9_-]")


def _replace_id_char(match: re.Match[str]) -> str:
    return "p" if match.group() == "+" else "-"


def anchor_id(title: str) -> str:
    """Turn a chapter title into an HTML id / fragment anchor.

    Every character outside ``[A-Za-z0-9_-]`` is replaced: ``+`` becomes
    ``p`` (so "C++" reads "Cpp") and anything else becomes ``-``. Case is
    preserved and runs of separators are not collapsed.

    Both replacements are themselves allowed characters, so the function
    is idempotent: ``anchor_id(anchor_id(s)) == anchor_id(s)``.

    Args:
        title: Arbitrary title text

    Returns:
        String containing only ``[A-Za-z0-9_-]``, same length as ``title``

    Examples:
        >>> anchor_id("C++ Basics")
        'Cpp-Basics'
        >>> anchor_id("std::vector<T>")
        'std--vector-T-'
        >>> anchor_id("Über")
        '-ber'
    """
    return _DISALLOWED_ID_CHAR.sub(_replace_id_char, title)


def escape_text(text: str) -> str:
    """Escape angle brackets in plain text.

    Only ``<`` and ``>`` are replaced. Ampersands and quotes pass through
    unchanged, so source text may carry its own entities.

    Examples:
        >>> escape_text("a<b>c<d")
        'a&lt;b&gt;c&lt;d'
        >>> escape_text("AT&T 'quoted'")
        "AT&T 'quoted'"
    """
    if not text:
        return ""
    return text.replace("<", "&lt;").replace(">", "&gt;")
