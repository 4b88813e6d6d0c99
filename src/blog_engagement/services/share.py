"""Share menu: social share links and copy-to-clipboard."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

import structlog

from blog_engagement.config import DEFAULT_SITE_URL
from blog_engagement.core.domain_types import SharePlatform, ShareMenuState

if TYPE_CHECKING:
    from blog_engagement.core.interfaces import (
        Clipboard,
        Notifier,
        Scheduler,
        TimerHandle,
        WindowOpener,
    )

logger = structlog.get_logger()

SHARE_WINDOW_TARGET = "_blank"
SHARE_WINDOW_FEATURES = "width=600,height=400"
COPIED = "Link copied to clipboard!"
COPY_FAILED = "Failed to copy link"

# Characters encodeURIComponent leaves alone, besides alphanumerics and "-_.~".
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode a string the way browsers' encodeURIComponent does."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def resolve_share_url(
    post_url: str | None,
    slug: str,
    location: str | None = None,
    site_url: str = DEFAULT_SITE_URL,
) -> str:
    """Pick the canonical URL to share.

    Args:
        post_url: Explicit URL of the post, preferred when given.
        slug: Post slug, used to build a URL on the public site.
        location: URL the viewer is currently on, if known.
        site_url: Public site origin.
    """
    return post_url or location or f"{site_url.rstrip('/')}/blog/{slug}"


def build_share_url(platform: SharePlatform, url: str, title: str) -> str | None:
    """Target URL for an external share platform, or None for copy."""
    text = encode_uri_component(f"Check out: {title}")
    encoded_url = encode_uri_component(url)

    if platform is SharePlatform.FACEBOOK:
        return f"https://www.facebook.com/sharer/sharer.php?u={encoded_url}"
    if platform is SharePlatform.TWITTER:
        return f"https://twitter.com/intent/tweet?text={text}&url={encoded_url}"
    if platform is SharePlatform.EMAIL:
        return f"mailto:?subject={text}&body={encoded_url}"
    return None


class ShareMenu:
    """Open/closed share menu with a temporary "copied" indicator.

    Any share action closes the menu, as does a click outside it
    (`dismiss`) or a second click on the trigger (`toggle`).
    """

    def __init__(
        self,
        title: str,
        url: str,
        notifier: Notifier,
        clipboard: Clipboard,
        opener: WindowOpener,
        scheduler: Scheduler,
        *,
        copy_reset_seconds: float = 2.0,
    ) -> None:
        self.title = title
        self.url = url
        self.state = ShareMenuState.CLOSED
        self.copied = False

        self._notifier = notifier
        self._clipboard = clipboard
        self._opener = opener
        self._scheduler = scheduler
        self._copy_reset_seconds = copy_reset_seconds
        self._reset_timer: TimerHandle | None = None

    @property
    def is_open(self) -> bool:
        return self.state is ShareMenuState.OPEN

    def toggle(self) -> None:
        """Trigger click."""
        self.state = ShareMenuState.CLOSED if self.is_open else ShareMenuState.OPEN

    def dismiss(self) -> None:
        """Click outside the open menu."""
        self.state = ShareMenuState.CLOSED

    def share_url(self, platform: SharePlatform) -> str | None:
        return build_share_url(platform, self.url, self.title)

    async def share(self, platform: SharePlatform | str) -> None:
        """Run a share action and close the menu."""
        platform = SharePlatform(platform)
        try:
            if platform is SharePlatform.COPY:
                await self._copy_link()
            else:
                target = self.share_url(platform)
                if target is not None:
                    self._opener.open(target, SHARE_WINDOW_TARGET, SHARE_WINDOW_FEATURES)
        finally:
            self.state = ShareMenuState.CLOSED

    def close(self) -> None:
        """Cancel the pending "copied" reset. Call when the panel goes away."""
        if self._reset_timer is not None:
            self._reset_timer.cancel()
            self._reset_timer = None

    async def _copy_link(self) -> None:
        try:
            await self._clipboard.write_text(self.url)
        except Exception as e:
            logger.warning("clipboard_write_failed", url=self.url, error=str(e))
            self._notifier.error(COPY_FAILED)
            return

        self.copied = True
        self._notifier.success(COPIED)
        self.close()
        self._reset_timer = self._scheduler.call_later(
            self._copy_reset_seconds, self._clear_copied
        )

    def _clear_copied(self) -> None:
        self.copied = False
        self._reset_timer = None
