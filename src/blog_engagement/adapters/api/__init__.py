"""Blog REST API adapter."""

from blog_engagement.adapters.api.client import BlogApiClient

__all__ = ["BlogApiClient"]
