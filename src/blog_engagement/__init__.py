"""Likes, threaded comments and sharing for church blog posts."""

from blog_engagement.adapters.api import BlogApiClient
from blog_engagement.config import EngagementSettings, get_settings
from blog_engagement.core.comment_tree import build_comment_tree, walk_thread
from blog_engagement.core.domain_types import (
    Comment,
    CommentStatus,
    CommentWithReplies,
    LikeStatus,
    LikeTarget,
    Session,
    SessionUser,
    SharePlatform,
)
from blog_engagement.services import (
    CommentComposer,
    EngagementPanel,
    LikeToggle,
    ShareMenu,
)

__version__ = "1.0.0"

__all__ = [
    "BlogApiClient",
    "EngagementSettings",
    "get_settings",
    "build_comment_tree",
    "walk_thread",
    "Comment",
    "CommentStatus",
    "CommentWithReplies",
    "LikeStatus",
    "LikeTarget",
    "Session",
    "SessionUser",
    "SharePlatform",
    "CommentComposer",
    "EngagementPanel",
    "LikeToggle",
    "ShareMenu",
]
