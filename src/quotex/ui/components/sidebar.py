import streamlit as st

from quotex.generation.providers.factory import Provider
from quotex.session.controller import SessionController
from ..config import PROVIDER_STYLES
from ..helpers import provider_badge


def render_sidebar(controller: SessionController) -> None:
    """
    Render provider selection, API key and strict-mode toggle.

    Writes the selections straight into the controller.
    """
    st.title("⚙️ AI Provider & API Key")

    providers = list(Provider)
    provider = st.radio(
        "Provider",
        options=providers,
        index=providers.index(controller.provider),
        format_func=lambda p: PROVIDER_STYLES[p].label,
        help="Each provider uses its own request format and auth header"
    )
    controller.select_provider(provider)
    st.markdown(provider_badge(PROVIDER_STYLES[provider]), unsafe_allow_html=True)

    api_key = st.text_input(
        "API key",
        value=controller.credential,
        type="password",
        placeholder=f"Enter your {PROVIDER_STYLES[provider].label} API key...",
    )
    controller.set_credential(api_key)

    if not api_key.strip():
        st.warning("⚠️ Enter your API key to run queries.")

    st.divider()

    controller.strict_quotes_only = st.checkbox(
        "Strict Quote Mode",
        value=controller.strict_quotes_only,
        help="Answer only with exact numbered quotes"
    )
