import json

import streamlit as st

from quotex.core.errors import ValidationError
from quotex.session.controller import SessionController
from ..config import PROVIDER_STYLES
from ..helpers import build_export, build_markdown_export, format_quote_origin, format_score


def render_query_panel(controller: SessionController) -> None:
    """Render the question box and run button; runs the query on click."""
    st.subheader("Query")

    question = st.text_area(
        "Question",
        placeholder="Ask your question in Hebrew or English...",
        height=120,
        label_visibility="collapsed",
    )

    style = PROVIDER_STYLES[controller.provider]
    label = "Running..." if controller.loading else f"🔍 Run Query with {style.label}"
    if st.button(label, disabled=not controller.can_run_query(question), type="primary"):
        with st.spinner("Running..."):
            try:
                controller.run_query(question)
            except ValidationError as e:
                st.warning(str(e))

    if controller.error:
        st.error(controller.error)


def render_response(controller: SessionController) -> None:
    st.subheader("Response")
    if controller.answer:
        st.markdown(controller.answer)
    else:
        st.caption("No response yet. Add documents and run a query.")


def render_quotes(controller: SessionController) -> None:
    """Render quote candidate cards with a preferred-quote selector."""
    st.subheader("Quote Candidates")

    if not controller.quotes:
        st.caption("Run a query to see exact quote options.")
        return

    columns = st.columns(min(len(controller.quotes), 3))
    for idx, quote in enumerate(controller.quotes):
        preferred = quote.id == controller.preferred_quote_id
        with columns[idx % len(columns)]:
            with st.container(border=True):
                st.markdown(f"_{quote.quote}_")
                st.caption(format_quote_origin(quote))
                st.caption(format_score(quote))
                if preferred:
                    st.success("✓ Preferred Quote")
                elif st.button("Set as preferred quote", key=f"prefer_{idx}_{quote.id}"):
                    controller.select_preferred_quote(quote.id)
                    st.rerun()

    _render_export(controller)


def _render_export(controller: SessionController) -> None:
    with st.expander("💾 Export result"):
        st.download_button(
            label="📥 Download as JSON",
            data=json.dumps(build_export(controller), indent=2, ensure_ascii=False),
            file_name="quotex_result.json",
            mime="application/json",
        )
        st.download_button(
            label="📥 Download as Markdown",
            data=build_markdown_export(controller),
            file_name="quotex_result.md",
            mime="text/markdown",
        )
