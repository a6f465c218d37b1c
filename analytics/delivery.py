"""
analytics/delivery.py
---------------------
Desktop delivery back-end for notebook exports.

Used by the CLI and by `open_in_colab` when no delivery is given:
- writes the .ipynb into a downloads directory,
- opens the viewer in the default browser,
- copies the code with the platform clipboard command, if one exists.
"""

from __future__ import annotations

import logging
import os
import platform
import shutil
import subprocess
import webbrowser
from pathlib import Path
from typing import List, Optional

from core.config import DOWNLOAD_DIR

logger = logging.getLogger(__name__)


def _clipboard_command() -> Optional[List[str]]:
    system = platform.system()
    if system == "Darwin":
        return ["pbcopy"]
    if system == "Windows":
        return ["clip"]
    if shutil.which("xclip"):
        return ["xclip", "-selection", "clipboard"]
    if shutil.which("xsel"):
        return ["xsel", "--clipboard", "--input"]
    return None


class LocalDelivery:
    """Save to disk, open the system browser, copy via the OS clipboard."""

    def __init__(self, download_dir: str | os.PathLike | None = None, open_browser: bool = True):
        self.download_dir = Path(download_dir or DOWNLOAD_DIR)
        self.open_browser = open_browser
        self.saved_path: Optional[Path] = None

    def save_file(self, filename: str, data: bytes) -> None:
        self.download_dir.mkdir(parents=True, exist_ok=True)
        path = self.download_dir / filename
        path.write_bytes(data)
        self.saved_path = path

    def open_viewer(self, url: str) -> bool:
        if not self.open_browser:
            return True
        return webbrowser.open_new_tab(url)

    def copy_to_clipboard(self, text: str) -> None:
        cmd = _clipboard_command()
        if cmd is None:
            logger.debug("[export] No clipboard command available; skipping copy.")
            return
        subprocess.run(cmd, input=text.encode("utf-8"), check=True, timeout=5)
