"""Formatting helpers for the quotex UI. Kept free of Streamlit calls."""

from datetime import datetime
from typing import Any, Dict

from quotex.core.types import QuoteCandidate
from quotex.session.controller import SessionController
from quotex.ui.constants.types import ProviderStyle


def format_quote_origin(quote: QuoteCandidate) -> str:
    """'source · p.N', with '?' for anything the model left out."""
    source = quote.source or "?"
    page = quote.page if quote.page is not None else "?"
    return f"{source} · p.{page}"


def format_score(quote: QuoteCandidate) -> str:
    if quote.score is None:
        return "Score: n/a"
    return f"Score: {quote.score * 100:.0f}%"


def build_export(controller: SessionController) -> Dict[str, Any]:
    """Snapshot of the current result for download."""
    return {
        "timestamp": datetime.now().isoformat(),
        "provider": controller.provider.value,
        "strict_quotes_only": controller.strict_quotes_only,
        "documents": [{"id": d.id, "name": d.name, "size": d.size} for d in controller.documents],
        "answer": controller.answer,
        "quotes": [q.to_dict() for q in controller.quotes],
        "preferred_quote_id": controller.preferred_quote_id,
    }


def build_markdown_export(controller: SessionController) -> str:
    md_content = f"# quotex Session\n\n**Date:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n"
    md_content += f"**Answer:**\n{controller.answer}\n\n"
    for q in controller.quotes:
        marker = " ✓" if q.id == controller.preferred_quote_id else ""
        md_content += f"- \"{q.quote}\" ({format_quote_origin(q)}, {format_score(q)}){marker}\n"
    return md_content


def provider_badge(style: ProviderStyle) -> str:
    """Coloured HTML label for the active provider."""
    return (
        f'<span style="background-color:{style.color};color:white;'
        f'padding:2px 8px;border-radius:4px;font-size:0.85em;">● {style.label}</span>'
    )
