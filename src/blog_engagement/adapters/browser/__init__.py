"""Browser-side effect adapters: clipboard, windows and timers."""

from blog_engagement.adapters.browser.clipboard import MemoryClipboard
from blog_engagement.adapters.browser.opener import BrowserOpener
from blog_engagement.adapters.browser.scheduler import LoopScheduler

__all__ = ["MemoryClipboard", "BrowserOpener", "LoopScheduler"]
