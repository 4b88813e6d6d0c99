"""Timer scheduling on the running asyncio loop."""

from __future__ import annotations

import asyncio
from collections.abc import Callable


class LoopScheduler:
    """Schedules callbacks with asyncio's loop.call_later.

    Must be used from inside a running event loop.
    """

    def call_later(
        self, delay_seconds: float, callback: Callable[[], None]
    ) -> asyncio.TimerHandle:
        """Run the callback once after the delay."""
        return asyncio.get_running_loop().call_later(delay_seconds, callback)
