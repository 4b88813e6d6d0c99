"""Unit tests for the share menu."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from blog_engagement.adapters.browser.clipboard import MemoryClipboard
from blog_engagement.adapters.notifications.toast import ToastNotifier
from blog_engagement.core.domain_types import SharePlatform, ShareMenuState, ToastLevel
from blog_engagement.services.share import (
    ShareMenu,
    build_share_url,
    encode_uri_component,
    resolve_share_url,
)
from tests.fixtures.mocks import FakeScheduler

POST_URL = "https://tpwbm.com.ng/blog/easter-sunday"


@pytest.fixture
def menu(
    notifier: ToastNotifier,
    clipboard: MemoryClipboard,
    opener: MagicMock,
    scheduler: FakeScheduler,
) -> ShareMenu:
    """Return a share menu for a sample post."""
    return ShareMenu("He Is Risen", POST_URL, notifier, clipboard, opener, scheduler)


class TestShareUrls:
    """Tests for share URL construction."""

    def test_facebook(self) -> None:
        """Test the Facebook sharer link."""
        assert build_share_url(SharePlatform.FACEBOOK, POST_URL, "Title") == (
            "https://www.facebook.com/sharer/sharer.php?u="
            "https%3A%2F%2Ftpwbm.com.ng%2Fblog%2Feaster-sunday"
        )

    def test_twitter(self) -> None:
        """Test the tweet intent link."""
        assert build_share_url(SharePlatform.TWITTER, POST_URL, "He Is Risen") == (
            "https://twitter.com/intent/tweet?text=Check%20out%3A%20He%20Is%20Risen"
            "&url=https%3A%2F%2Ftpwbm.com.ng%2Fblog%2Feaster-sunday"
        )

    def test_email(self) -> None:
        """Test the mailto link."""
        assert build_share_url(SharePlatform.EMAIL, POST_URL, "Grace & Peace") == (
            "mailto:?subject=Check%20out%3A%20Grace%20%26%20Peace"
            "&body=https%3A%2F%2Ftpwbm.com.ng%2Fblog%2Feaster-sunday"
        )

    def test_copy_has_no_url(self) -> None:
        """Test that copy is not an external link."""
        assert build_share_url(SharePlatform.COPY, POST_URL, "Title") is None

    def test_encode_matches_browser_safe_set(self) -> None:
        """Test that encodeURIComponent's unreserved marks survive."""
        assert encode_uri_component("a-b_c.d!e~f*g'h(i)j k/") == "a-b_c.d!e~f*g'h(i)j%20k%2F"


class TestResolveShareUrl:
    """Tests for resolve_share_url."""

    def test_prefers_post_url(self) -> None:
        """Test that an explicit URL wins."""
        assert resolve_share_url(POST_URL, "x", "https://elsewhere") == POST_URL

    def test_falls_back_to_location(self) -> None:
        """Test that the current location is used next."""
        assert resolve_share_url(None, "x", "https://here/blog/x") == "https://here/blog/x"

    def test_falls_back_to_site(self) -> None:
        """Test the URL derived from the slug."""
        assert (
            resolve_share_url(None, "easter", site_url="https://church.example.org/")
            == "https://church.example.org/blog/easter"
        )


class TestMenuState:
    """Tests for open/close transitions."""

    def test_starts_closed(self, menu: ShareMenu) -> None:
        """Test the initial state."""
        assert menu.state is ShareMenuState.CLOSED

    def test_trigger_toggles(self, menu: ShareMenu) -> None:
        """Test that the trigger opens and re-closes the menu."""
        menu.toggle()
        assert menu.is_open is True

        menu.toggle()
        assert menu.is_open is False

    def test_outside_click_closes(self, menu: ShareMenu) -> None:
        """Test that clicking outside closes the menu."""
        menu.toggle()

        menu.dismiss()

        assert menu.state is ShareMenuState.CLOSED

    @pytest.mark.parametrize("platform", list(SharePlatform))
    async def test_every_action_closes(self, menu: ShareMenu, platform: SharePlatform) -> None:
        """Test that choosing any action closes the menu."""
        menu.toggle()

        await menu.share(platform)

        assert menu.state is ShareMenuState.CLOSED


class TestShareActions:
    """Tests for share side effects."""

    async def test_external_platform_opens_window(self, menu: ShareMenu, opener: MagicMock) -> None:
        """Test that a platform link opens in a sized new window."""
        await menu.share("facebook")

        opener.open.assert_called_once_with(
            menu.share_url(SharePlatform.FACEBOOK), "_blank", "width=600,height=400"
        )

    async def test_copy_link_resets_after_two_seconds(
        self,
        menu: ShareMenu,
        clipboard: MemoryClipboard,
        scheduler: FakeScheduler,
        notifier: ToastNotifier,
    ) -> None:
        """Test the copied flag and its timed reset."""
        await menu.share(SharePlatform.COPY)

        assert clipboard.text == POST_URL
        assert menu.copied is True
        assert [(t.level, t.message) for t in notifier.toasts] == [
            (ToastLevel.SUCCESS, "Link copied to clipboard!")
        ]

        scheduler.advance(1.5)
        assert menu.copied is True

        scheduler.advance(0.5)
        assert menu.copied is False

    async def test_recopy_restarts_timer(self, menu: ShareMenu, scheduler: FakeScheduler) -> None:
        """Test that copying again extends the copied state."""
        await menu.share(SharePlatform.COPY)
        scheduler.advance(1.5)
        await menu.share(SharePlatform.COPY)

        scheduler.advance(1.0)
        assert menu.copied is True

        scheduler.advance(1.0)
        assert menu.copied is False

    async def test_clipboard_failure(
        self,
        notifier: ToastNotifier,
        opener: MagicMock,
        scheduler: FakeScheduler,
    ) -> None:
        """Test that a failed write is reported and not marked copied."""
        clipboard = AsyncMock()
        clipboard.write_text.side_effect = PermissionError("denied")
        menu = ShareMenu("T", POST_URL, notifier, clipboard, opener, scheduler)

        await menu.share(SharePlatform.COPY)

        assert menu.copied is False
        assert scheduler.timers == []
        assert notifier.toasts[0].level is ToastLevel.ERROR
        assert notifier.toasts[0].message == "Failed to copy link"

    async def test_close_cancels_reset(self, menu: ShareMenu, scheduler: FakeScheduler) -> None:
        """Test that closing drops the pending reset."""
        await menu.share(SharePlatform.COPY)

        menu.close()
        scheduler.advance(5)

        assert menu.copied is True

    async def test_unknown_platform(self, menu: ShareMenu) -> None:
        """Test that an unknown platform name is rejected."""
        with pytest.raises(ValueError):
            await menu.share("myspace")
