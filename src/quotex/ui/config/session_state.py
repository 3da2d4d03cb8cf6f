"""Session state initialization for Streamlit."""

import streamlit as st

from quotex.session.controller import SessionController
from quotex.utils.settings import settings


def initialize_session_state():
    """Initialize all session state variables."""

    # One controller per browser session: corpus, provider, last result
    if "controller" not in st.session_state:
        st.session_state.controller = SessionController(
            provider=settings.ui.default_provider,
            strict_quotes_only=settings.ui.strict_default,
        )
