"""Display strings for engagement counters and comment dates.

The panel uses these for its like and comment labels and for the date on
each thread entry.
"""

from __future__ import annotations

from datetime import datetime


def pluralize(count: int, noun: str) -> str:
    """Return e.g. "1 Like", "3 Likes", or the bare noun for zero."""
    if count <= 0:
        return noun
    return f"{count} {noun}{'' if count == 1 else 's'}"


def format_comment_date(value: datetime | str | None) -> str:
    """Format a comment timestamp as "Jan 5, 2024".

    Unparseable or missing values read as "Recently".
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return "Recently"
    if value is None:
        return "Recently"
    return f"{value:%b} {value.day}, {value.year}"
