"""Core domain: types, errors, ports and the comment tree builder."""

from blog_engagement.core.comment_tree import (
    MAX_REPLY_DEPTH,
    build_comment_tree,
    can_reply,
    count_nodes,
    walk_thread,
)
from blog_engagement.core.exceptions import (
    ApiError,
    ApiUnavailableError,
    CommentValidationError,
    EngagementError,
    MalformedResponseError,
)

__all__ = [
    "MAX_REPLY_DEPTH",
    "build_comment_tree",
    "can_reply",
    "count_nodes",
    "walk_thread",
    "ApiError",
    "ApiUnavailableError",
    "CommentValidationError",
    "EngagementError",
    "MalformedResponseError",
]
