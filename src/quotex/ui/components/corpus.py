import streamlit as st

from quotex.core.errors import ValidationError
from quotex.session.controller import SessionController


def render_corpus_panel(controller: SessionController) -> None:
    """Render the add-document form and the corpus list."""
    st.subheader("Add Document Text")

    with st.form("add_document", clear_on_submit=True):
        name = st.text_input("Document name", placeholder="Document name (e.g. Article 1)")
        text = st.text_area(
            "Document text",
            placeholder="Paste your document text here (Hebrew or English)...",
            height=200,
        )
        submitted = st.form_submit_button("+ Add to Corpus", use_container_width=True)

    if submitted:
        try:
            controller.add_document(text, name)
        except ValidationError as e:
            st.warning(str(e))

    documents = controller.documents
    col1, col2 = st.columns([3, 1])
    with col1:
        st.subheader(f"Corpus ({len(documents)})")
    with col2:
        if documents and st.button("Clear all", key="clear_corpus"):
            controller.clear_corpus()
            st.rerun()

    if not documents:
        st.caption("No documents yet.")
        return

    for doc in documents:
        with st.container(border=True):
            st.markdown(f"**{doc.name}**")
            st.caption(f"{doc.size:,} chars · {doc.uploaded_at.astimezone():%Y-%m-%d %H:%M}")
            if st.button("Remove", key=f"remove_{doc.id}"):
                controller.remove_document(doc.id)
                st.rerun()
