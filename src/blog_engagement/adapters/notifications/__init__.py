"""Notification adapters."""

from blog_engagement.adapters.notifications.toast import ToastNotifier

__all__ = ["ToastNotifier"]
