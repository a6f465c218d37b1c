# tests/fakes.py

from __future__ import annotations

from typing import List, Tuple


class FakeDelivery:
    """Records every delivery call; individual steps can be made to fail."""

    def __init__(self, *, fail_save=False, block_popup=False, fail_open=False, fail_copy=False):
        self.fail_save = fail_save
        self.block_popup = block_popup
        self.fail_open = fail_open
        self.fail_copy = fail_copy
        self.saved: List[Tuple[str, bytes]] = []
        self.opened: List[str] = []
        self.copied: List[str] = []

    def save_file(self, filename: str, data: bytes) -> None:
        if self.fail_save:
            raise OSError("disk full")
        self.saved.append((filename, data))

    def open_viewer(self, url: str) -> bool:
        if self.fail_open:
            raise RuntimeError("no browser")
        self.opened.append(url)
        return not self.block_popup

    def copy_to_clipboard(self, text: str) -> None:
        if self.fail_copy:
            raise PermissionError("clipboard denied")
        self.copied.append(text)
