"""
Display helpers for the hourlog screens.

Formatting lives here rather than in the widgets so the dashboard and
forms show hours and dates consistently.
"""
from __future__ import annotations

from datetime import datetime
from typing import Iterable

from hourlog.models import ProjectSummary


def format_hours(hours: float) -> str:
    """Format hours with one decimal place, e.g. ``4.5``."""
    return f"{hours:.1f}"


def format_date(date_str: str) -> str:
    """Return a user friendly MM-DD-YYYY date string from YYYY-MM-DD."""
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").strftime("%m-%d-%Y")
    except ValueError:
        return date_str


def bar_fractions(summary: Iterable[ProjectSummary]) -> list[float]:
    """
    Relative bar length for each summary row.

    Lengths are scaled against the largest total, but never against less
    than one hour, so a lone short entry does not fill the whole bar.
    """
    rows = list(summary)
    scale = max([1.0] + [row.total_hours for row in rows])
    return [row.total_hours / scale for row in rows]
