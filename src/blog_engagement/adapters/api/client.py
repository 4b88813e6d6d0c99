"""HTTP client for the blog engagement endpoints."""

from __future__ import annotations

from typing import Any, TypeVar
import httpx
import structlog
from pydantic import BaseModel, ValidationError

from blog_engagement.core.domain_types import (
    CommentPayload,
    CommentsPage,
    LikeStatus,
    LikeTarget,
    SubmitCommentResponse,
    post_path,
)
from blog_engagement.core.exceptions import (
    ApiError,
    ApiUnavailableError,
    MalformedResponseError,
)

logger = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=BaseModel)


class BlogApiClient:
    """Talks to the blog's likes and comments REST API.

    The underlying httpx client keeps cookies, so the anonymous
    `blog_session_id` cookie the backend sets on a first like is sent back
    on later requests.

    Attributes:
        base_url: Origin of the blog API, without a trailing slash.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Origin of the blog API.
            timeout_seconds: Request timeout, used when creating a client.
            http_client: Existing client to reuse. It is not closed by aclose().
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout_seconds)

    async def __aenter__(self) -> BlogApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    # Likes

    async def get_like_status(self, target: LikeTarget) -> LikeStatus:
        """Fetch the like count and the viewer's like state."""
        return await self._request("GET", target.path, LikeStatus)

    async def like(self, target: LikeTarget) -> LikeStatus:
        """Like the target and return the new state."""
        return await self._request("POST", target.path, LikeStatus)

    async def unlike(self, target: LikeTarget) -> LikeStatus:
        """Remove the viewer's like and return the new state."""
        return await self._request("DELETE", target.path, LikeStatus)

    # Comments

    async def list_comments(self, slug: str) -> CommentsPage:
        """Fetch the approved comments of a post, newest first."""
        return await self._request("GET", f"{post_path(slug)}/comments", CommentsPage)

    async def create_comment(self, slug: str, payload: CommentPayload) -> SubmitCommentResponse:
        """Submit a comment or reply.

        Returns:
            The backend's message and, when it echoes one, the created comment
            with its moderation status.
        """
        return await self._request(
            "POST",
            f"{post_path(slug)}/comments",
            SubmitCommentResponse,
            json=payload.model_dump(by_alias=True),
        )

    async def _request(
        self,
        method: str,
        path: str,
        model: type[ModelT],
        json: dict[str, Any] | None = None,
    ) -> ModelT:
        url = f"{self.base_url}{path}"
        logger.debug("blog_api_request", method=method, path=path)

        try:
            response = await self._http.request(method, url, json=json)
        except httpx.HTTPError as e:
            logger.warning("blog_api_unavailable", method=method, path=path, error=str(e))
            raise ApiUnavailableError(f"{method} {path} failed: {e}") from e

        if not response.is_success:
            message = _error_message(response)
            logger.warning(
                "blog_api_error",
                method=method,
                path=path,
                status_code=response.status_code,
                error=message,
            )
            raise ApiError(response.status_code, message)

        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("blog_api_malformed_response", method=method, path=path, error=str(e))
            raise MalformedResponseError(f"{method} {path} returned an invalid body") from e


def _error_message(response: httpx.Response) -> str | None:
    """Extract the backend's error text from a failed response, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    message = body.get("error") or body.get("message")
    return message if isinstance(message, str) and message else None
