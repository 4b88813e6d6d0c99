"""Window opener backed by the standard webbrowser module."""

from __future__ import annotations

import webbrowser

import structlog

logger = structlog.get_logger()


class BrowserOpener:
    """Opens share links in the user's default browser.

    `target` and `features` follow window.open(); only "_blank" is honoured,
    as a new tab. Window sizing has no equivalent and is ignored.
    """

    def open(self, url: str, target: str = "_blank", features: str = "") -> None:
        """Open the URL without blocking on the browser."""
        opened = (
            webbrowser.open_new_tab(url) if target == "_blank" else webbrowser.open(url)
        )
        logger.info("share_window_opened", url=url, opened=opened)
