"""
Task card renderer: badge, title, description and the code block with its
Colab actions.
"""

from __future__ import annotations

import streamlit as st

from analytics.notebook_export import InvalidInput, open_in_colab
from catalogue.models import TaskRecord
from core.config import COLAB_URL
from ui.components.streamlit_delivery import StreamlitDelivery, render_pending_download


def render_code_block(code: str, title: str, key: str, language: str = "python") -> None:
    """Code with copy button (built into st.code) and the Open in Colab flow."""
    st.caption("Google Colab / Jupyter Notebook")
    st.code(code, language=language, line_numbers=False)

    col_open, col_link, col_download = st.columns([1, 1, 1])
    with col_open:
        clicked = st.button("🚀 Open in Colab", key=f"colab-{key}", type="primary")
    with col_link:
        st.link_button("Google Colab ↗", COLAB_URL)

    if clicked:
        try:
            open_in_colab(code, title, delivery=StreamlitDelivery(key))
        except InvalidInput as e:
            st.error(f"Could not export this snippet: {e}")
        else:
            st.toast(
                "A notebook file is ready. Upload it to Colab or paste the code from your clipboard.",
                icon="📓",
            )

    with col_download:
        render_pending_download(key)


def render_task(task: TaskRecord) -> None:
    st.markdown(f"`Task {task.id}` **{task.title}**")
    st.write(task.description)
    render_code_block(task.code, task.title, key=str(task.id))
    st.divider()
