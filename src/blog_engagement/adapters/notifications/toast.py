"""In-process toast notifications."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

import structlog

from blog_engagement.core.domain_types import Toast, ToastLevel

logger = structlog.get_logger()


class ToastNotifier:
    """Collects toasts for a view to display, and logs each one.

    A view either polls `toasts`/`drain()` or registers a listener that is
    called with every new toast.
    """

    def __init__(self, listener: Callable[[Toast], None] | None = None, limit: int = 50) -> None:
        """Initialize the notifier.

        Args:
            listener: Optional callback invoked for each toast.
            limit: Maximum number of undrained toasts kept.

        Raises:
            ValueError: If limit is below 1.
        """
        if limit < 1:
            raise ValueError(f"Toast limit must be at least 1, got {limit}")
        self.toasts: list[Toast] = []
        self._listener = listener
        self._limit = limit

    def success(self, message: str) -> None:
        """Queue a success toast."""
        self._push(ToastLevel.SUCCESS, message)

    def error(self, message: str) -> None:
        """Queue an error toast."""
        self._push(ToastLevel.ERROR, message)

    def drain(self) -> list[Toast]:
        """Return and forget every queued toast."""
        toasts, self.toasts = self.toasts, []
        return toasts

    def _push(self, level: ToastLevel, message: str) -> None:
        toast = Toast(level=level, message=message, created_at=datetime.now(UTC))
        self.toasts.append(toast)
        del self.toasts[: -self._limit]

        logger.info("toast_shown", level=level.value, message=message)

        if self._listener is not None:
            self._listener(toast)
