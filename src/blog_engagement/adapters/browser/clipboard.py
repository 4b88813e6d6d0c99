"""Clipboard adapter."""

from __future__ import annotations


class MemoryClipboard:
    """Clipboard held in process memory.

    Used where there is no system clipboard to reach, such as server-side
    rendering, and as the default in tests.
    """

    def __init__(self) -> None:
        self.text: str | None = None

    async def write_text(self, text: str) -> None:
        """Replace the clipboard contents."""
        self.text = text
