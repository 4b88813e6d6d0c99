"""Engagement panel for a single blog post.

The panel is the state holder a view renders from. It wires together the
post like toggle, one like toggle per displayed comment, the comment
composer and the share menu. Every panel owns its own state; nothing is
shared between panels for different posts.

Requests are never cancelled. Independent requests (a like toggle and a
comment fetch, say) may complete in any order; each writes a disjoint part
of the state.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

import structlog

from blog_engagement.config import EngagementSettings, get_settings
from blog_engagement.core.comment_tree import build_comment_tree, walk_thread
from blog_engagement.core.domain_types import (
    Comment,
    CommentWithReplies,
    LikeStatus,
    LikeTarget,
    Session,
    SharePlatform,
    ThreadEntry,
)
from blog_engagement.core.exceptions import EngagementError
from blog_engagement.core.formatting import pluralize
from blog_engagement.services.comments import CommentComposer, SubmissionResult
from blog_engagement.services.likes import LikeToggle
from blog_engagement.services.share import ShareMenu, resolve_share_url

if TYPE_CHECKING:
    from blog_engagement.adapters.api.client import BlogApiClient
    from blog_engagement.core.interfaces import Clipboard, Notifier, Scheduler, WindowOpener

logger = structlog.get_logger()


class EngagementPanel:
    """Likes, threaded comments and sharing for one post.

    Attributes:
        slug: Post slug.
        allow_comments: Whether comments are enabled for the post.
        comments: Flat comment list, newest first.
        comment_count: Number of visible comments.
        is_comments_expanded: Whether the comment section is open.
        is_comments_loading: True while comments are being fetched.
        post_like: Like toggle for the post itself.
        composer: Comment form state.
        share_menu: Share menu state.
    """

    def __init__(
        self,
        client: BlogApiClient,
        slug: str,
        title: str,
        *,
        notifier: Notifier,
        clipboard: Clipboard,
        opener: WindowOpener,
        scheduler: Scheduler,
        allow_comments: bool = True,
        post_url: str | None = None,
        location: str | None = None,
        session: Session | None = None,
        settings: EngagementSettings | None = None,
        on_focus: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the panel.

        Args:
            client: Blog API client.
            slug: Post slug.
            title: Post title, used in share text.
            notifier: Toast sink.
            clipboard: Clipboard used by "copy link".
            opener: Opens external share windows.
            scheduler: Timer source for the "copied" reset.
            allow_comments: Whether the post accepts comments.
            post_url: Canonical post URL, if known.
            location: URL the viewer is on, used when post_url is missing.
            session: Signed-in member session, if any.
            settings: Overrides the environment settings.
            on_focus: Called when a reply should focus the comment box.
        """
        self.slug = slug
        self.title = title
        self.allow_comments = allow_comments
        self.settings = settings or get_settings()

        self._client = client
        self._notifier = notifier

        self.post_like = LikeToggle(client, LikeTarget(slug=slug), notifier, announce=True)
        self.comment_likes: dict[str, LikeToggle] = {}

        self.comments: list[Comment] = []
        self.comment_count = 0
        self.is_comments_expanded = False
        self.is_comments_loading = False
        self._comments_loaded = False

        self.composer = CommentComposer(
            client,
            slug,
            notifier,
            session=session,
            max_depth=self.settings.max_reply_depth,
            on_focus=on_focus,
        )
        self.share_menu = ShareMenu(
            title,
            resolve_share_url(post_url, slug, location, self.settings.site_url),
            notifier,
            clipboard,
            opener,
            scheduler,
            copy_reset_seconds=self.settings.copy_reset_seconds,
        )

    # Lifecycle

    async def mount(self) -> None:
        """Load the post's like state."""
        await self.post_like.refresh()

    def close(self) -> None:
        """Release timers. Outstanding requests still complete."""
        self.share_menu.close()

    # Likes

    async def toggle_like(self) -> LikeStatus | None:
        return await self.post_like.toggle()

    def comment_like(self, comment_id: str) -> LikeToggle:
        """Like toggle of a displayed comment.

        Raises:
            KeyError: If the comment is not displayed.
        """
        return self.comment_likes[comment_id]

    async def toggle_comment_like(self, comment_id: str) -> LikeStatus | None:
        return await self.comment_like(comment_id).toggle()

    @property
    def like_label(self) -> str:
        return pluralize(self.post_like.like_count, "Like")

    # Comments

    @property
    def comment_label(self) -> str:
        return pluralize(self.comment_count, "Comment")

    async def toggle_comments(self) -> None:
        """Open or close the comment section, loading comments until a fetch succeeds."""
        self.is_comments_expanded = not self.is_comments_expanded
        if self.is_comments_expanded and not self._comments_loaded:
            await self.fetch_comments()

    async def fetch_comments(self) -> None:
        """Load comments and the like state of each one.

        Failures leave the current comments in place and are not shown.
        """
        if not self.allow_comments:
            return

        self.is_comments_loading = True
        try:
            page = await self._client.list_comments(self.slug)
        except EngagementError as e:
            logger.warning("comments_fetch_failed", slug=self.slug, error=str(e))
            return
        finally:
            self.is_comments_loading = False
        self._comments_loaded = True

        if not page.allow_comments:
            self.allow_comments = False
            self.comments = []
            self.comment_count = 0
            self.comment_likes = {}
            return

        self.comments = list(page.comments)
        self.comment_count = page.comment_count or len(self.comments)
        self.comment_likes = {}
        await self._mount_comment_likes(self.comments)

    @property
    def tree(self) -> list[CommentWithReplies]:
        """Comments nested by reply, rebuilt from the flat list."""
        return build_comment_tree(self.comments)

    def thread(self) -> list[ThreadEntry]:
        """Comments in display order with their depth and Reply visibility."""
        return list(walk_thread(self.tree, self.settings.max_reply_depth))

    def start_reply(self, comment_id: str, depth: int) -> bool:
        """Point the composer at a displayed comment.

        Returns:
            False if the comment is unknown or too deeply nested to reply to.
        """
        comment = next((c for c in self.comments if c.id == comment_id), None)
        if comment is None:
            return False
        return self.composer.start_reply(comment, depth)

    def cancel_reply(self) -> None:
        self.composer.cancel_reply()

    async def submit_comment(self) -> SubmissionResult | None:
        """Submit the composer's draft.

        Approved comments are shown immediately; others wait for moderation
        and appear on a later fetch.
        """
        result = await self.composer.submit()
        if result is None or not result.is_visible:
            return result

        comment = result.comment
        self.comments.insert(0, comment)
        self.comment_count += 1
        await self._mount_comment_likes([comment])
        return result

    async def _mount_comment_likes(self, comments: Iterable[Comment]) -> None:
        toggles = []
        for comment in comments:
            toggle = LikeToggle(
                self._client,
                LikeTarget(slug=self.slug, comment_id=comment.id),
                self._notifier,
                initial=LikeStatus(like_count=comment.like_count, has_liked=comment.has_liked),
            )
            self.comment_likes[comment.id] = toggle
            toggles.append(toggle)
        await asyncio.gather(*(toggle.refresh() for toggle in toggles))

    # Sharing

    def toggle_share_menu(self) -> None:
        self.share_menu.toggle()

    def dismiss_share_menu(self) -> None:
        self.share_menu.dismiss()

    async def share(self, platform: SharePlatform | str) -> None:
        await self.share_menu.share(platform)
