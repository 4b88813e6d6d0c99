"""Unit tests for exceptions."""

from __future__ import annotations

import pytest

from blog_engagement.core.exceptions import (
    ApiError,
    ApiUnavailableError,
    CommentValidationError,
    EngagementError,
    MalformedResponseError,
)


class TestEngagementError:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "error_type",
        [ApiError, ApiUnavailableError, MalformedResponseError, CommentValidationError],
    )
    def test_inherits_from_engagement_error(self, error_type: type[Exception]) -> None:
        """Test that every error can be caught as EngagementError."""
        assert issubclass(error_type, EngagementError)


class TestApiError:
    """Tests for ApiError."""

    def test_keeps_server_message(self) -> None:
        """Test that the backend message is kept verbatim."""
        error = ApiError(400, "Already liked")

        assert error.status_code == 400
        assert error.message == "Already liked"
        assert str(error) == "Already liked"

    def test_without_message(self) -> None:
        """Test the fallback string when the backend sent no message."""
        error = ApiError(502)

        assert error.message is None
        assert "502" in str(error)
