# Serverless entry point: the platform imports `app` and invokes it as ASGI.
# Importing backend.main initializes the app once per cold start.
import os
import sys

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.append(ROOT_DIR)

from backend.main import app  # noqa: E402,F401
