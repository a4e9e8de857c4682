"""Utility modules for Folio.

Provides:
- text: anchor_id, escape_text for markup-safe strings
- logger: get_logger for logging
"""

from folio.utils.logger import get_logger
from folio.utils.text import anchor_id, escape_text

__all__ = [
    "anchor_id",
    "escape_text",
    "get_logger",
]
