"""Domain types for post engagement.

Wire payloads use camelCase keys; the models expose snake_case attributes
and accept either spelling on input. Comment trees are in-memory projections
rebuilt on every fetch and are never sent back to the backend.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for models that travel over the blog API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class CommentStatus(str, Enum):
    """Moderation outcome the backend assigns to a new comment."""

    APPROVED = "approved"
    PENDING = "pending"
    REJECTED = "rejected"


class Comment(WireModel):
    """A comment as received from the backend, flat with a parent pointer.

    Attributes:
        id: Opaque identifier.
        author_name: Display name of the author.
        content: Comment body.
        created_at: Creation timestamp.
        parent_comment_id: Id of the comment this replies to, or None.
        like_count: Server-computed like total.
        has_liked: Whether the current viewer liked it.
    """

    id: str
    author_name: str
    content: str
    created_at: datetime
    parent_comment_id: str | None = None
    like_count: int = Field(default=0, ge=0)
    has_liked: bool = False

    @field_validator("id", "parent_comment_id", mode="before")
    @classmethod
    def _ids_are_strings(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)


class CommentWithReplies(Comment):
    """A comment together with its nested replies."""

    replies: list[CommentWithReplies] = Field(default_factory=list)


class CreatedComment(Comment):
    """The comment echoed back by the backend after submission."""

    status: CommentStatus = CommentStatus.PENDING

    @field_validator("status", mode="before")
    @classmethod
    def _unknown_status_is_pending(cls, value: Any) -> CommentStatus:
        try:
            return CommentStatus(value)
        except ValueError:
            return CommentStatus.PENDING


class LikeStatus(WireModel):
    """Aggregate like state for one post or comment."""

    like_count: int = Field(default=0, ge=0)
    has_liked: bool = False


def post_path(slug: str) -> str:
    """API path of a post, with the slug escaped as a single path segment."""
    return f"/api/blog/{quote(slug, safe='')}"


class LikeTarget(BaseModel):
    """Something that can be liked: a post, or a comment on a post."""

    model_config = ConfigDict(frozen=True)

    slug: str
    comment_id: str | None = None

    @property
    def path(self) -> str:
        """API path of the like resource."""
        if self.comment_id is None:
            return f"{post_path(self.slug)}/likes"
        return f"{post_path(self.slug)}/comments/{quote(self.comment_id, safe='')}/likes"


class CommentsPage(WireModel):
    """Response of the comment listing endpoint."""

    comments: list[Comment] = Field(default_factory=list)
    comment_count: int = 0
    allow_comments: bool = True
    message: str | None = None


class CommentPayload(WireModel):
    """Request body for creating a comment."""

    content: str
    author_name: str
    author_email: str
    parent_comment_id: str | None = None


class SubmitCommentResponse(WireModel):
    """Response of the comment creation endpoint."""

    message: str | None = None
    comment: CreatedComment | None = None


class SessionUser(BaseModel):
    """Identity of a signed-in member."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    email: str | None = None


class Session(BaseModel):
    """Auth session supplied by the host application. Read-only."""

    model_config = ConfigDict(frozen=True)

    user: SessionUser | None = None


@dataclass(frozen=True)
class ReplyTarget:
    """The comment the composer is currently replying to."""

    id: str
    author_name: str


class SharePlatform(str, Enum):
    """Share menu actions."""

    FACEBOOK = "facebook"
    TWITTER = "twitter"
    EMAIL = "email"
    COPY = "copy"


class ShareMenuState(str, Enum):
    """Visibility of the share menu."""

    CLOSED = "closed"
    OPEN = "open"


class ToastLevel(str, Enum):
    """Severity of a toast notification."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Toast:
    """A transient user-facing notification."""

    level: ToastLevel
    message: str
    created_at: datetime


@dataclass(frozen=True)
class ThreadEntry:
    """One rendered comment in a thread, with its nesting depth.

    Attributes:
        comment: The node being rendered.
        depth: Nesting depth, 0 for root comments.
        can_reply: Whether the Reply action is offered at this depth.
        date_label: Creation date as shown next to the author.
    """

    comment: CommentWithReplies
    depth: int
    can_reply: bool
    date_label: str
