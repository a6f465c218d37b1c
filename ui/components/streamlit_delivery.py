"""
Streamlit delivery back-end for notebook exports.

- save_file        : parks the file in session state; `render_pending_download`
                     turns it into a st.download_button on the same run.
- open_viewer      : window.open from a zero-height component (browsers may
                     block it as a popup; the page also shows a Colab link).
- copy_to_clipboard: navigator.clipboard from the same kind of component.
"""

from __future__ import annotations

import json

import streamlit as st
import streamlit.components.v1 as components

_STATE_PREFIX = "psx_export:"


class StreamlitDelivery:
    """Delivers one export on behalf of the widget identified by `key`."""

    def __init__(self, key: str):
        self.key = key

    def save_file(self, filename: str, data: bytes) -> None:
        st.session_state[_STATE_PREFIX + self.key] = (filename, data)

    def open_viewer(self, url: str) -> bool:
        components.html(
            f"<script>window.open({json.dumps(url)}, '_blank', 'noopener,noreferrer');</script>",
            height=0,
        )
        return True

    def copy_to_clipboard(self, text: str) -> None:
        components.html(
            "<script>"
            f"navigator.clipboard && navigator.clipboard.writeText({json.dumps(text)})"
            ".catch(() => console.warn('Failed to copy code to clipboard'));"
            "</script>",
            height=0,
        )


def render_pending_download(key: str) -> bool:
    """Show the download button for a parked export. Returns True if one was shown."""
    pending = st.session_state.get(_STATE_PREFIX + key)
    if not pending:
        return False
    filename, data = pending
    st.download_button(
        "⬇️ Download notebook",
        data=data,
        file_name=filename,
        mime="application/x-ipynb+json",
        key=f"download-{key}",
    )
    return True
