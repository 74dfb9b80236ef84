"""Record types shared by the store, the session and the screens."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Project:
    id: int
    name: str


@dataclass(frozen=True)
class TimeEntry:
    id: int
    project_id: int
    task_description: str
    hours: float
    date: str  # YYYY-MM-DD


@dataclass(frozen=True)
class ProjectSummary:
    """Total hours logged against one project."""

    id: int
    name: str
    total_hours: float
