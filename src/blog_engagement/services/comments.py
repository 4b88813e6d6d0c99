"""Comment and reply submission."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from blog_engagement.core.comment_tree import MAX_REPLY_DEPTH, can_reply
from blog_engagement.core.domain_types import (
    Comment,
    CommentPayload,
    CommentStatus,
    CreatedComment,
    ReplyTarget,
    Session,
)
from blog_engagement.core.exceptions import ApiError, CommentValidationError, EngagementError

if TYPE_CHECKING:
    from blog_engagement.adapters.api.client import BlogApiClient
    from blog_engagement.core.interfaces import Notifier

logger = structlog.get_logger()

GENERIC_ERROR = "Something went wrong. Please try again."
EMPTY_COMMENT = "Please enter a comment"
MISSING_IDENTITY = "Please enter your name and email"
SUBMIT_FAILED = "Failed to submit comment"
SUBMITTED = "Comment submitted successfully!"


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a successful submission.

    Attributes:
        message: Text shown to the user.
        comment: The created comment, if the backend echoed it.
        is_visible: Whether the comment may be shown right away.
    """

    message: str
    comment: CreatedComment | None

    @property
    def is_visible(self) -> bool:
        return self.comment is not None and self.comment.status is CommentStatus.APPROVED


class CommentComposer:
    """Form state and submission flow for a new comment or reply.

    Signed-in members comment under their session identity; guests must
    give a name and email. Form fields survive a failed submission so the
    user can retry.
    """

    def __init__(
        self,
        client: BlogApiClient,
        slug: str,
        notifier: Notifier,
        *,
        session: Session | None = None,
        max_depth: int = MAX_REPLY_DEPTH,
        on_focus: Callable[[], None] | None = None,
    ) -> None:
        self.slug = slug
        self.session = session
        self.max_depth = max_depth

        self.content = ""
        self.author_name = ""
        self.author_email = ""
        self.replying_to: ReplyTarget | None = None
        self.is_submitting = False

        self._client = client
        self._notifier = notifier
        self._on_focus = on_focus

    @property
    def is_signed_in(self) -> bool:
        return self.session is not None and self.session.user is not None

    @property
    def moderation_hint(self) -> str:
        """Tells the user when their comment will appear."""
        if self.is_signed_in:
            return "Your comment will be posted immediately."
        return "Your comment will be reviewed before posting."

    def start_reply(self, comment: Comment, depth: int) -> bool:
        """Reply to a comment shown at the given depth.

        Returns:
            False, leaving the composer untouched, when replies are not
            offered at that depth.
        """
        if not can_reply(depth, self.max_depth):
            return False
        self.replying_to = ReplyTarget(id=comment.id, author_name=comment.author_name)
        if self._on_focus is not None:
            self._on_focus()
        return True

    def cancel_reply(self) -> None:
        self.replying_to = None

    def validate(self) -> None:
        """Check the draft before sending.

        Raises:
            CommentValidationError: With a user-facing message.
        """
        if not self.content.strip():
            raise CommentValidationError(EMPTY_COMMENT)
        if not self.is_signed_in and (
            not self.author_name.strip() or not self.author_email.strip()
        ):
            raise CommentValidationError(MISSING_IDENTITY)

    def build_payload(self) -> CommentPayload:
        """Resolve the author identity and assemble the request body."""
        user = self.session.user if self.session is not None else None
        if user is not None:
            name = user.name or self.author_name.strip()
            email = user.email or self.author_email.strip()
        else:
            name = self.author_name.strip()
            email = self.author_email.strip()

        return CommentPayload(
            content=self.content.strip(),
            author_name=name,
            author_email=email,
            parent_comment_id=self.replying_to.id if self.replying_to else None,
        )

    async def submit(self) -> SubmissionResult | None:
        """Validate and post the draft.

        Returns:
            The result on success. None when the draft was invalid, a
            submission was already running, or the request failed; the user
            has been told why in each case except the second.
        """
        if self.is_submitting:
            return None

        try:
            self.validate()
        except CommentValidationError as e:
            self._notifier.error(str(e))
            return None

        payload = self.build_payload()
        self.is_submitting = True
        try:
            response = await self._client.create_comment(self.slug, payload)
        except ApiError as e:
            self._notifier.error(e.message or SUBMIT_FAILED)
            return None
        except EngagementError as e:
            logger.error("comment_submit_failed", slug=self.slug, error=str(e))
            self._notifier.error(GENERIC_ERROR)
            return None
        finally:
            self.is_submitting = False

        comment = response.comment
        if comment is not None and comment.parent_comment_id is None:
            comment = comment.model_copy(update={"parent_comment_id": payload.parent_comment_id})

        message = response.message or SUBMITTED
        self._notifier.success(message)
        self._reset()

        logger.info(
            "comment_submitted",
            slug=self.slug,
            comment_id=comment.id if comment else None,
            status=comment.status.value if comment else None,
            is_reply=payload.parent_comment_id is not None,
        )
        return SubmissionResult(message=message, comment=comment)

    def _reset(self) -> None:
        self.content = ""
        self.replying_to = None
        if not self.is_signed_in:
            self.author_name = ""
            self.author_email = ""
