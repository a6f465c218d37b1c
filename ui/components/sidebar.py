"""Category navigation for the dashboard sidebar."""

from __future__ import annotations

import streamlit as st

from catalogue.store import CatalogueStore
from core.metadata import CORE_METADATA


def render_sidebar(store: CatalogueStore) -> str:
    """Render the category picker and credits; return the active category."""
    categories = store.list_categories()

    with st.sidebar:
        st.markdown("## 📈 PSX Analytics")
        st.caption("TASK CATEGORIES")
        active = st.radio(
            "Task Categories",
            options=categories,
            format_func=lambda c: f"{store.category_icon(c).emoji} {store.category_label(c)}",
            key="active_category",
            label_visibility="collapsed",
        )

        st.markdown("---")
        st.caption(f"**{CORE_METADATA['author_id']} - {CORE_METADATA['author']}**")
        st.caption(f"{CORE_METADATA['course']} · {CORE_METADATA['instructor']}")

    return active
