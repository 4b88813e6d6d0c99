"""Engagement services: likes, comments, sharing and the panel that joins them."""

from blog_engagement.services.comments import CommentComposer, SubmissionResult
from blog_engagement.services.likes import LikeToggle
from blog_engagement.services.panel import EngagementPanel
from blog_engagement.services.share import ShareMenu, build_share_url, resolve_share_url

__all__ = [
    "CommentComposer",
    "SubmissionResult",
    "LikeToggle",
    "EngagementPanel",
    "ShareMenu",
    "build_share_url",
    "resolve_share_url",
]
