"""Environment-driven settings for the engagement panel."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_API_BASE_URL = "http://localhost:3000"
DEFAULT_SITE_URL = "https://tpwbm.com.ng"


@dataclass(frozen=True)
class EngagementSettings:
    """Runtime settings.

    Attributes:
        api_base_url: Origin serving the /api/blog endpoints.
        site_url: Public site origin, used for share links when the post
            URL is unknown.
        timeout_seconds: Per-request timeout for the blog API.
        max_reply_depth: First nesting depth without a Reply action.
        copy_reset_seconds: How long the "Copied!" state lasts.
    """

    api_base_url: str = DEFAULT_API_BASE_URL
    site_url: str = DEFAULT_SITE_URL
    timeout_seconds: float = 30.0
    max_reply_depth: int = 3
    copy_reset_seconds: float = 2.0


def _env_number(name: str, default: float, cast: type) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def load_settings() -> EngagementSettings:
    """Read settings from the environment.

    Raises:
        ValueError: If a numeric variable does not parse.
    """
    return EngagementSettings(
        api_base_url=os.environ.get("BLOG_API_BASE_URL", "").strip().rstrip("/")
        or DEFAULT_API_BASE_URL,
        site_url=os.environ.get("BLOG_SITE_URL", "").strip().rstrip("/") or DEFAULT_SITE_URL,
        timeout_seconds=_env_number("BLOG_API_TIMEOUT_SECONDS", 30.0, float),
        max_reply_depth=int(_env_number("BLOG_MAX_REPLY_DEPTH", 3, int)),
        copy_reset_seconds=_env_number("BLOG_COPY_RESET_SECONDS", 2.0, float),
    )


@lru_cache
def get_settings() -> EngagementSettings:
    """Get the process-wide settings, read once."""
    return load_settings()
