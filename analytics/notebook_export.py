"""
analytics/notebook_export.py
----------------------------

Packages a code snippet into a Colab-ready notebook (.ipynb) and hands it
to a delivery back-end.

The document layout is the one Google Colab accepts on upload:
one markdown cell with the title, one code cell with the snippet,
Colab / kernelspec metadata and nbformat 4.0.

Only `InvalidInput` is raised to callers. Saving the file, opening the
viewer and copying to the clipboard are best-effort: failures are logged
and the export still counts as done.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from core.config import COLAB_URL

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "PSX Analytics"
DEFAULT_FILE_LABEL = "PSX_Analytics"
NOTEBOOK_EXTENSION = ".ipynb"
MAX_TITLE_LENGTH = 100
GENERATED_BY = "This notebook was generated from PSX Analytics Companion.\n"

_UNSAFE_TITLE_CHARS = re.compile(r"[^a-zA-Z0-9\s_-]")
_WHITESPACE = re.compile(r"\s+")


class InvalidInput(ValueError):
    """Raised when the code to export is empty or not text."""


class NotebookDelivery(Protocol):
    """Host-specific primitives used to hand an exported notebook to the user."""

    def save_file(self, filename: str, data: bytes) -> None: ...

    def open_viewer(self, url: str) -> bool: ...

    def copy_to_clipboard(self, text: str) -> None: ...


@dataclass(frozen=True)
class NotebookExport:
    """Serialized notebook ready for download."""
    title: str
    filename: str
    payload: bytes

    media_type = "application/x-ipynb+json"


# --------------------------------------------------------------------------- #
# Document construction
# --------------------------------------------------------------------------- #

def sanitize_title(title: str) -> str:
    """
    Reduce a display title to characters safe for a file name.

    Keeps ASCII letters, digits, whitespace, '-' and '_'; trims; caps the
    length at 100 and trims again, so the result never ends in whitespace.
    An empty result becomes DEFAULT_FILE_LABEL.
    """
    cleaned = _UNSAFE_TITLE_CHARS.sub("", title or "").strip()[:MAX_TITLE_LENGTH].strip()
    return cleaned or DEFAULT_FILE_LABEL


def notebook_filename(sanitized_title: str) -> str:
    return _WHITESPACE.sub("_", sanitized_title) + NOTEBOOK_EXTENSION


def split_code_lines(code: str) -> List[str]:
    """Split on '\\n' and re-append the terminator to every line."""
    return [line + "\n" for line in code.split("\n")]


def join_code_lines(lines: List[str]) -> str:
    """Inverse of split_code_lines."""
    return "\n".join(line[:-1] if line.endswith("\n") else line for line in lines)


def build_notebook(code: str, title: str) -> Dict[str, Any]:
    """Two-cell notebook document for `code`, titled with the display `title`."""
    return {
        "cells": [
            {
                "cell_type": "markdown",
                "metadata": {},
                "source": [
                    f"# {title}\n",
                    "\n",
                    GENERATED_BY,
                ],
            },
            {
                "cell_type": "code",
                "execution_count": None,
                "metadata": {
                    "id": "code-cell",
                },
                "source": split_code_lines(code),
                "outputs": [],
            },
        ],
        "metadata": {
            "colab": {
                "name": title,
                "private_outputs": False,
                "provenance": [],
                "toc_visible": True,
            },
            "kernelspec": {
                "display_name": "Python 3",
                "name": "python3",
            },
            "language_info": {
                "name": "python",
            },
        },
        "nbformat": 4,
        "nbformat_minor": 0,
    }


def serialize_notebook(notebook: Dict[str, Any]) -> str:
    return json.dumps(notebook, indent=2, ensure_ascii=False)


def _validate_code(code: Any) -> str:
    if not isinstance(code, str) or not code:
        raise InvalidInput("Invalid code provided")
    return code


def build_export(code: str, title: Optional[str] = None) -> NotebookExport:
    """
    Validate, sanitize and serialize one snippet.

    Raises
    ------
    InvalidInput
        If `code` is empty or not a string.
    """
    code = _validate_code(code)
    display_title = DEFAULT_TITLE if title is None else str(title)
    safe_title = sanitize_title(display_title)
    document = serialize_notebook(build_notebook(code, display_title))
    return NotebookExport(
        title=safe_title,
        filename=notebook_filename(safe_title),
        payload=document.encode("utf-8"),
    )


# --------------------------------------------------------------------------- #
# Export flow
# --------------------------------------------------------------------------- #

def open_in_colab(
    code: str,
    title: str = DEFAULT_TITLE,
    *,
    delivery: Optional[NotebookDelivery] = None,
) -> None:
    """
    Download `code` as a notebook, open Google Colab and copy the code.

    The user uploads the downloaded file to Colab, or pastes the code from
    the clipboard into a fresh notebook.
    """
    export = build_export(code, title)

    if delivery is None:
        from analytics.delivery import LocalDelivery

        delivery = LocalDelivery()

    try:
        delivery.save_file(export.filename, export.payload)
        logger.info("[export] Saved notebook %s (%d bytes)", export.filename, len(export.payload))
    except Exception as e:  # noqa: BLE001
        logger.warning("[export] Could not save %s: %s", export.filename, e)

    try:
        opened = delivery.open_viewer(COLAB_URL)
    except Exception as e:  # noqa: BLE001
        logger.warning("[export] Could not open %s: %s", COLAB_URL, e)
    else:
        if not opened:
            logger.warning("[export] Popup blocked. Please allow popups for this site.")

    try:
        delivery.copy_to_clipboard(code)
    except Exception as e:  # noqa: BLE001
        logger.warning("[export] Failed to copy code to clipboard: %s", e)
