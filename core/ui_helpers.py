"""
core/ui_helpers.py
------------------
Backend request helper for the Streamlit pages.
Ensures consistent error handling and caching.
"""

from __future__ import annotations
import requests
import streamlit as st
from core.config import BACKEND_URL

@st.cache_data(ttl=60)
def fetch_backend(endpoint: str, params: dict | None = None) -> dict | list:
    """
    Unified safe fetch for GET endpoints.
    Automatically prefixes BACKEND_URL and handles JSON decoding.
    When the backend is unreachable, returns {"status": "offline", "message": ...}
    instead of raising. Like any result, that payload stays cached for the TTL (60s).
    """
    url = f"{BACKEND_URL.rstrip('/')}/{endpoint.lstrip('/')}"
    try:
        resp = requests.get(url, params=params, timeout=5)
        resp.raise_for_status()
        return resp.json()
    except requests.exceptions.RequestException as e:
        return {"status": "offline", "message": f"Backend unreachable at {BACKEND_URL} ({e.__class__.__name__})"}
