"""Engagement-specific exceptions.

All exceptions raised by the engagement panel inherit from EngagementError,
so a view can catch every expected failure with a single except clause while
programming errors still propagate.
"""

from __future__ import annotations


class EngagementError(Exception):
    """Base exception for all engagement errors."""

    pass


class ApiError(EngagementError):
    """The blog API answered with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by the backend.
        message: The backend's `error` message, if it sent one.
    """

    def __init__(self, status_code: int, message: str | None = None) -> None:
        """Initialize ApiError.

        Args:
            status_code: HTTP status code of the response.
            message: Human-readable error from the response body.
        """
        super().__init__(message or f"Blog API returned HTTP {status_code}")
        self.status_code = status_code
        self.message = message


class ApiUnavailableError(EngagementError):
    """The request never produced a response (DNS, connect, timeout)."""

    pass


class MalformedResponseError(EngagementError):
    """The response body was not JSON or did not match the expected shape."""

    pass


class CommentValidationError(EngagementError):
    """A comment draft failed client-side validation.

    Raised before any request is sent. The message is user-facing.
    """

    pass
