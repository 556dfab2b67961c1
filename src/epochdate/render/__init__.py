"""Renderers turning calendar fields into text."""

from epochdate.render._base import Renderer, RendererName
from epochdate.render.iso8601 import ISO8601DateRenderer, ISO8601Renderer
from epochdate.render.java import JavaRenderer
from epochdate.render.locale import LocaleRenderer

__all__ = [
    "Renderer",
    "RendererName",
    "ISO8601DateRenderer",
    "ISO8601Renderer",
    "JavaRenderer",
    "LocaleRenderer",
    "get_renderer",
]

_REGISTRY: dict[str, type[Renderer]] = {
    RendererName.JAVA: JavaRenderer,
    RendererName.ISO8601: ISO8601Renderer,
    RendererName.ISO8601_DATE: ISO8601DateRenderer,
    RendererName.LOCALE: LocaleRenderer,
}


def get_renderer(name: str) -> Renderer:
    """Get a renderer instance by name.

    Args:
        name: Renderer name (e.g., "java", "iso8601", "iso8601-date", "locale").

    Returns:
        A Renderer instance.

    Raises:
        ValueError: If the renderer name is unknown.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        raise ValueError(
            f"unknown renderer: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return cls()
