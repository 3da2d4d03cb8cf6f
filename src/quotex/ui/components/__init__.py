"""UI components for the quotex app."""

from .sidebar import render_sidebar
from .corpus import render_corpus_panel
from .results import render_query_panel, render_response, render_quotes

__all__ = [
    "render_sidebar",
    "render_corpus_panel",
    "render_query_panel",
    "render_response",
    "render_quotes",
]
