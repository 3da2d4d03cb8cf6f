"""
quotex interactive UI

Paste Hebrew/English documents, query a chosen provider, and pick a preferred
source-grounded quote.

Run with: streamlit run src/quotex/ui/app.py
"""

from __future__ import annotations

import streamlit as st

from quotex.ui.components import (
    render_corpus_panel,
    render_query_panel,
    render_quotes,
    render_response,
    render_sidebar,
)
from quotex.ui.config import initialize_session_state
from quotex.utils.logging_config import setup_logging
from quotex.utils.settings import settings

setup_logging(level=settings.app.log_level)

# Page config
st.set_page_config(
    page_title="Academic Source Platform",
    page_icon="📚",
    layout="wide",
    initial_sidebar_state="expanded",
)

initialize_session_state()
controller = st.session_state.controller

with st.sidebar:
    render_sidebar(controller)

st.title("📚 Academic Source Platform")
st.caption("Paste Hebrew/English documents · Query · Get exact source-grounded quotes")

left, right = st.columns([1, 2])

with left:
    render_corpus_panel(controller)

with right:
    render_query_panel(controller)
    render_response(controller)

st.divider()
render_quotes(controller)
