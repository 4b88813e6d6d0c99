"""Protocol definitions for the panel's side effects.

Services depend on these protocols only. Concrete implementations live in
blog_engagement.adapters, and tests substitute fakes.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class Notifier(Protocol):
    """Shows transient toast notifications to the user."""

    def success(self, message: str) -> None:
        """Show a success toast."""
        ...

    def error(self, message: str) -> None:
        """Show an error toast."""
        ...


@runtime_checkable
class Clipboard(Protocol):
    """Writes text to the user's clipboard."""

    async def write_text(self, text: str) -> None:
        """Replace the clipboard contents.

        Raises:
            Exception: Implementation-specific failure to write.
        """
        ...


@runtime_checkable
class WindowOpener(Protocol):
    """Opens a URL in a new browser window or tab."""

    def open(self, url: str, target: str, features: str) -> None:
        """Open the URL. Fire and forget."""
        ...


@runtime_checkable
class TimerHandle(Protocol):
    """A scheduled callback that can still be cancelled."""

    def cancel(self) -> None:
        """Prevent the callback from running."""
        ...


@runtime_checkable
class Scheduler(Protocol):
    """Runs a callback once after a delay."""

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        """Schedule the callback.

        Args:
            delay_seconds: Delay before the callback runs.
            callback: Zero-argument callable.

        Returns:
            Handle that cancels the pending callback.
        """
        ...
