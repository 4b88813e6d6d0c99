"""Like toggles for posts and comments."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from blog_engagement.core.domain_types import LikeStatus, LikeTarget
from blog_engagement.core.exceptions import ApiError, EngagementError

if TYPE_CHECKING:
    from blog_engagement.adapters.api.client import BlogApiClient
    from blog_engagement.core.interfaces import Notifier

logger = structlog.get_logger()

GENERIC_ERROR = "Something went wrong. Please try again."
LIKE_FAILED = "Failed to update like"
LIKE_THANKS = "Thanks for liking this post!"


class LikeToggle:
    """Like state of one post or comment, mutated only by server responses.

    The local state is replaced by whatever the backend returns; it is
    never incremented or decremented on the client. While a toggle request
    is outstanding further toggles are ignored.

    Attributes:
        target: What this toggle likes.
        like_count: Last known like total.
        has_liked: Whether the viewer likes the target.
        is_loading: True while a toggle request is in flight.
    """

    def __init__(
        self,
        client: BlogApiClient,
        target: LikeTarget,
        notifier: Notifier,
        *,
        announce: bool = False,
        initial: LikeStatus | None = None,
    ) -> None:
        """Initialize the toggle.

        Args:
            client: Blog API client.
            target: Post or comment to like.
            notifier: Toast sink.
            announce: Thank the viewer when they like the target.
            initial: Known state to start from instead of zero.
        """
        self.target = target
        self._client = client
        self._notifier = notifier
        self._announce = announce

        initial = initial or LikeStatus()
        self.like_count = initial.like_count
        self.has_liked = initial.has_liked
        self.is_loading = False

    @property
    def status(self) -> LikeStatus:
        """Current state as a LikeStatus."""
        return LikeStatus(like_count=self.like_count, has_liked=self.has_liked)

    async def refresh(self) -> None:
        """Load the current state. Failures keep the existing state silently."""
        try:
            status = await self._client.get_like_status(self.target)
        except EngagementError as e:
            logger.warning(
                "like_status_fetch_failed",
                path=self.target.path,
                error=str(e),
            )
            return
        self._adopt(status)

    async def toggle(self) -> LikeStatus | None:
        """Like or unlike the target.

        Returns:
            The new state, or None if the request was skipped or failed.
        """
        if self.is_loading:
            return None

        self.is_loading = True
        was_liked = self.has_liked
        try:
            if was_liked:
                status = await self._client.unlike(self.target)
            else:
                status = await self._client.like(self.target)
        except ApiError as e:
            self._notifier.error(e.message or LIKE_FAILED)
            return None
        except EngagementError as e:
            logger.error("like_toggle_failed", path=self.target.path, error=str(e))
            self._notifier.error(GENERIC_ERROR)
            return None
        finally:
            self.is_loading = False

        self._adopt(status)
        if self._announce and not was_liked and status.has_liked:
            self._notifier.success(LIKE_THANKS)
        return status

    def _adopt(self, status: LikeStatus) -> None:
        self.like_count = status.like_count
        self.has_liked = status.has_liked
