# core/logging_setup.py

from __future__ import annotations

import logging
import sys

_PROJECT_PREFIXES = ("core", "catalogue", "analytics", "backend", "ui", "cli", "api")


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console readable:
    - allow all project logs
    - access logs from uvicorn at INFO+
    - any other third party only at WARNING+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "__main__" or name.split(".", 1)[0] in _PROJECT_PREFIXES:
            return True

        if name.startswith("uvicorn"):
            return record.levelno >= logging.INFO

        return record.levelno >= logging.WARNING


_configured = False


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configure root logging with a single timestamped console handler.

    Safe to call more than once: Streamlit re-executes page scripts on every
    interaction, so only the first call installs the handler.
    """
    global _configured
    if _configured:
        return

    root = logging.getLogger()
    root.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%I:%M:%S %p",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    logging.captureWarnings(True)
    _configured = True
