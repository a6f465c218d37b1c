"""
core/health.py
--------------
System health diagnostics for the PSX Analytics backend.

Purpose
-------
- Used by the FastAPI `/health` endpoint and the Streamlit status caption.
- Reports version, uptime, CPU/memory usage and catalogue size.
- Returns a JSON-safe dict ready for serialization.
"""

from __future__ import annotations

import time
import platform
import psutil
from typing import Dict, Any

from core.metadata import __version__
from catalogue.store import get_default_store


# Cache the process start time for uptime calculation
START_TIME = time.time()


def system_health() -> Dict[str, Any]:
    """
    Return structured backend health diagnostics.

    Returns
    -------
    dict
        JSON-safe health report.
    """
    store = get_default_store()

    # --- System metrics ---
    try:
        cpu_load = psutil.cpu_percent(interval=0.1)
        memory_usage = round(psutil.Process().memory_info().rss / (1024 * 1024), 2)
    except Exception:
        cpu_load = None
        memory_usage = None

    return {
        "status": "ok",
        "message": "Backend operational.",
        "version": __version__,
        "tasks": len(store),
        "categories": len(store.list_categories()),
        "cpu_load": cpu_load,
        "memory_usage": memory_usage,
        "uptime_sec": round(time.time() - START_TIME, 2),
        "system": platform.system(),
        "release": platform.release(),
    }
