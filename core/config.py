"""
core/config.py
--------------
Central configuration hub for the Streamlit UI, the FastAPI backend and the CLI.

- Reads all settings from environment variables with local defaults.
- Exposes module-level constants, like the rest of the codebase expects.
"""

from __future__ import annotations
import os

# ---------------------------------------------------------------------------
# Runtime environment
# ---------------------------------------------------------------------------

PSX_ENV: str = os.getenv("PSX_ENV", "development").lower()
VERCEL: bool = bool(os.getenv("VERCEL"))

HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "5000"))

# Built client assets served by the backend (index.html + bundles)
STATIC_DIR: str = os.getenv(
    "PSX_STATIC_DIR", os.path.join(os.getcwd(), "dist", "public")
)

# ---------------------------------------------------------------------------
# UI / export configuration
# ---------------------------------------------------------------------------

BACKEND_URL: str = os.getenv("BACKEND_URL", f"http://127.0.0.1:{PORT}").rstrip("/")
COLAB_URL: str = os.getenv("COLAB_URL", "https://colab.research.google.com/")
DOWNLOAD_DIR: str = os.getenv("PSX_DOWNLOAD_DIR", os.path.join(os.getcwd(), "notebooks"))


def is_production() -> bool:
    """True when running as a deployed build (production env or Vercel)."""
    return PSX_ENV == "production" or VERCEL


def static_max_age() -> int:
    """Cache lifetime in seconds for static assets: one year in production."""
    return 31_536_000 if is_production() else 0
