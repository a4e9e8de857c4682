"""Verify package imports work correctly."""


def test_import_folio() -> None:
    """Test that folio can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import folio

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert folio.__version__ == expected


def test_version_format() -> None:
    from folio import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    import folio

    for name in folio.__all__:
        assert hasattr(folio, name), name


def test_renderer_satisfies_protocol() -> None:
    from folio.renderers.html import HtmlRenderer
    from folio.renderers.protocol import DocumentRenderer

    renderer: DocumentRenderer = HtmlRenderer()
    assert callable(renderer.render)
