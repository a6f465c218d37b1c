"""
PSX Analytics - Streamlit Launcher
----------------------------------
Landing page of the multipage app (`streamlit run ui/overview.py`).
The task dashboard lives under ui/pages/.
"""

import os
import sys

import pandas as pd
import plotly.express as px
import streamlit as st

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.append(ROOT_DIR)

from catalogue.store import get_default_store
from core.config import COLAB_URL
from core.metadata import CORE_METADATA
from core.ui_helpers import fetch_backend

st.set_page_config(page_title="PSX Analytics", layout="wide")

store = get_default_store()

# ---------------------------------------------------------------------------
# 1. Hero
# ---------------------------------------------------------------------------
st.caption("💻 Google Colab Ready Code Generator")
st.title("Master Pakistan Stock Exchange Data Analytics")
st.markdown(
    f":green[Prepared by: ({CORE_METADATA['author']} {CORE_METADATA['author_id'].split('-', 1)[-1]})]"
)
st.markdown(f":green[Presented to: ({CORE_METADATA['instructor']} sb)]")
st.write(
    f"Access {len(store)} ready-to-run Python snippets for Google Colab. "
    "From data collection to machine learning models for PSX."
)

col_start, col_colab = st.columns(2)
with col_start:
    st.page_link("pages/dashboard.py", label="Start Analysis Tasks", icon="➡️")
with col_colab:
    st.link_button("Open Google Colab", COLAB_URL)

# ---------------------------------------------------------------------------
# 2. Feature grid
# ---------------------------------------------------------------------------
st.markdown("---")
features = [
    ("🗄️", "Data Collection", "Scripts to fetch and clean PSX data from multiple sources."),
    ("📊", "Visual Analytics", "Generate professional candlestick charts and heatmaps."),
    ("🧠", "ML Forecasting", "ARIMA, Prophet, and LSTM models ready to copy-paste."),
]
for col, (icon, title, desc) in zip(st.columns(len(features)), features):
    with col:
        st.subheader(f"{icon} {title}")
        st.write(desc)

# ---------------------------------------------------------------------------
# 3. Catalogue summary
# ---------------------------------------------------------------------------
st.markdown("---")
st.subheader("📚 Task Library")
counts = pd.DataFrame(
    [
        {"Category": store.category_label(name), "Tasks": n}
        for name, n in store.count_by_category().items()
    ]
)
fig = px.bar(counts, x="Tasks", y="Category", orientation="h", text="Tasks")
fig.update_layout(yaxis={"categoryorder": "array", "categoryarray": counts["Category"][::-1].tolist()})
st.plotly_chart(fig, use_container_width=True)

with st.expander("🔌 Backend status", expanded=False):
    st.json(fetch_backend("/health"))

# ---------------------------------------------------------------------------
# 4. Footer
# ---------------------------------------------------------------------------
st.markdown("---")
st.caption(
    f"{CORE_METADATA['author_id']} - {CORE_METADATA['author']} © "
    f"{CORE_METADATA['course']} Sir. Amjad Farooq sb"
)
st.caption(CORE_METADATA["institution"])
