"""ContextVar-based render configuration for Folio.

A RenderConfig is passed to HtmlRenderer explicitly, or picked up from the
current context when the renderer is created without one.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent
    storage, so setting a default in one thread never affects another.

Usage:
    renderer = HtmlRenderer(RenderConfig(build_toc=True))

    # Or scope a default for everything created inside a block
    with render_config_context(RenderConfig(build_toc=True)):
        html = render(doc)

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any

from folio.boilerplate import HTML_FOOTER, HTML_HEADER_CLOSE, HTML_HEADER_OPEN
from folio.errors import ConfigError

STUB_PLACEHOLDER = "TODO"


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        header_open: Page boilerplate emitted before the document title
        header_close: Page boilerplate emitted after the title (style, <body>)
        footer: Page boilerplate emitted after the last chapter
        placeholder: Output of marker nodes that are not resolved
        build_toc: Render TOC markers as a nested table of contents
        anchor_definitions: Render IdentifierDefinition markers as named anchors

    """

    header_open: str = HTML_HEADER_OPEN
    header_close: str = HTML_HEADER_CLOSE
    footer: str = HTML_FOOTER
    placeholder: str = STUB_PLACEHOLDER
    build_toc: bool = False
    anchor_definitions: bool = False

    def __post_init__(self) -> None:
        for name in ("header_open", "header_close", "footer", "placeholder"):
            if not isinstance(getattr(self, name), str):
                raise ConfigError(name, "must be a string")
        if not self.placeholder:
            raise ConfigError("placeholder", "must not be empty")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "RenderConfig":
        """Create RenderConfig from a mapping.

        Only keys naming RenderConfig fields are used; unknown keys are
        silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({"build_toc": True, "theme": "dark"})
            >>> config.build_toc
            True

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the render configuration of the current context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set the render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset the current context to the module default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Temporarily install a render configuration.

    The previous configuration is restored on exit, even if the block
    raises.

    Example:
        >>> with render_config_context(RenderConfig(placeholder="(pending)")):
        ...     html = render(doc)
    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "STUB_PLACEHOLDER",
    "RenderConfig",
    "get_render_config",
    "reset_render_config",
    "render_config_context",
    "set_render_config",
]
