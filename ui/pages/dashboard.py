"""
PSX Analytics - Task Dashboard
------------------------------
Browse the task library by category, search it, and export any snippet as a
Colab-ready notebook.

Backed by:
- catalogue.store.get_default_store (in-process, read-only)
- analytics.notebook_export.open_in_colab (via ui/components/code_block.py)
"""

import os
import sys

import streamlit as st

# Ensure project root is on sys.path when running via `streamlit run ui/overview.py`
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if ROOT_DIR not in sys.path:
    sys.path.append(ROOT_DIR)

from catalogue.store import get_default_store
from core.logging_setup import setup_logging
from ui.components.code_block import render_task
from ui.components.sidebar import render_sidebar

setup_logging()

st.set_page_config(page_title="PSX Analytics Dashboard", layout="wide")

store = get_default_store()

# ---------------------------------------------------------------------------
# Sidebar + header
# ---------------------------------------------------------------------------
active_category = render_sidebar(store)

col_title, col_search = st.columns([3, 1])
with col_title:
    st.title(active_category)
    st.caption("Browse tasks and copy code for Google Colab")
with col_search:
    search_query = st.text_input(
        "Search",
        placeholder="Search tasks...",
        key="search_query",
        label_visibility="collapsed",
    )

# ---------------------------------------------------------------------------
# Task list
# ---------------------------------------------------------------------------
tasks = store.filter(active_category, search_query)

if tasks:
    for task in tasks:
        render_task(task)
else:
    st.info("No tasks found in this category matching your search.")
