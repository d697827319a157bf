"""HTML/CSS snippets referencing generated variants."""

from webimg.snippets.templates import (
    DEFAULT_ALT,
    DEFAULT_SELECTOR,
    SnippetSources,
    render_image_set,
    render_picture,
    sources_from_report,
)

__all__ = [
    "DEFAULT_ALT",
    "DEFAULT_SELECTOR",
    "SnippetSources",
    "render_image_set",
    "render_picture",
    "sources_from_report",
]
