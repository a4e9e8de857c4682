"""Exception classes for Folio.

Rendering trusts its input, so the hierarchy is small: contract violations
inside the renderer and invalid configuration.
"""

from __future__ import annotations

from typing import Any


class FolioError(Exception):
    """Base exception for all Folio errors."""

    pass


class RenderError(FolioError):
    """Rendering contract violation.

    Raised when a node cannot be rendered in the current context, e.g. a
    ``References`` marker rendered with no document to resolve it against.
    """

    def __init__(self, message: str, node: Any = None) -> None:
        """Initialize render error.

        Args:
            message: Error description
            node: The node being rendered (optional)
        """
        self.message = message
        self.node = node

        prefix = f"{type(node).__name__}: " if node is not None else ""
        super().__init__(f"{prefix}{message}")


class ConfigError(FolioError):
    """Invalid render configuration."""

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending RenderConfig field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"RenderConfig.{field}: {message}")
