"""
Data layer for the hourlog time tracker.

``TimeBackend`` describes the operations the rest of the application
relies on: adding and deleting projects and time entries, plus the
per‑project hour summary shown on the dashboard.  ``MemoryBackend``
keeps everything in process memory for the lifetime of the window; a
networked backend would implement the same contract and return the same
record shapes.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from hourlog.ids import mint_id
from hourlog.models import Project, ProjectSummary, TimeEntry

logger = logging.getLogger(__name__)


# --- Seed data ---
# Loaded at startup so the dashboard has something to show on first run.
SEED_PROJECTS = [
    Project(1, "Project Alpha - Mobile App"),
    Project(2, "Project Bravo - Website Redesign"),
    Project(3, "Internal - R&D"),
    Project(4, "Client X - Marketing Campaign"),
]

SEED_TIME_ENTRIES = [
    TimeEntry(101, 2, "Initial design mockups", 4.5, "2025-06-20"),
    TimeEntry(102, 1, "Setup development environment", 3.0, "2025-06-19"),
    TimeEntry(103, 3, "Research new charting libraries", 2.0, "2025-06-19"),
    TimeEntry(104, 2, "Wireframing user flows", 5.0, "2025-06-18"),
    TimeEntry(105, 4, "Analyze competitor ads", 2.5, "2025-06-20"),
]


def normalise_name(name: str) -> str:
    """Return the key used to compare project names for uniqueness."""
    return name.strip().casefold()


class TimeBackend(ABC):
    """Contract between the session and wherever projects and entries live."""

    @abstractmethod
    def projects(self) -> List[Project]:
        """Return the projects in creation order."""

    @abstractmethod
    def time_entries(self) -> List[TimeEntry]:
        """Return the time entries, newest first."""

    @abstractmethod
    def add_project(self, name: str) -> Optional[Project]:
        """Create a project, or return ``None`` if the name is blank or taken."""

    @abstractmethod
    def delete_project(self, project_id: int) -> None:
        """Remove a project together with all of its time entries."""

    @abstractmethod
    def add_time_entry(
        self,
        project_id: int,
        task_description: str,
        hours: float,
        date: str,
    ) -> TimeEntry:
        """Record a new time entry and return it."""

    @abstractmethod
    def delete_time_entry(self, entry_id: int) -> None:
        """Remove a single time entry."""

    @abstractmethod
    def compute_summary(self) -> List[ProjectSummary]:
        """Return total hours per project, largest first."""

    def get_project(self, project_id: int) -> Optional[Project]:
        for project in self.projects():
            if project.id == project_id:
                return project
        return None


class MemoryBackend(TimeBackend):
    """
    Keep projects and time entries in memory.

    Missing ids and rejected names are silently ignored rather than
    raising; validation with user‑facing messages happens in
    ``hourlog.forms`` before these methods are called.
    """

    def __init__(
        self,
        projects: Optional[List[Project]] = None,
        time_entries: Optional[List[TimeEntry]] = None,
    ) -> None:
        self._projects: List[Project] = list(projects or [])
        self._entries: List[TimeEntry] = list(time_entries or [])
        # Every id handed out this session, including deleted ones.
        self._issued: set[int] = {p.id for p in self._projects} | {e.id for e in self._entries}
        self._revision = 0
        self._summary_cache: Optional[tuple[int, List[ProjectSummary]]] = None

    @classmethod
    def with_seed_data(cls) -> "MemoryBackend":
        """Return a backend pre‑loaded with the demo projects and entries."""
        return cls(SEED_PROJECTS, SEED_TIME_ENTRIES)

    def projects(self) -> List[Project]:
        return list(self._projects)

    def time_entries(self) -> List[TimeEntry]:
        return list(self._entries)

    def _changed(self) -> None:
        self._revision += 1

    # --- Projects ---
    def add_project(self, name: str) -> Optional[Project]:
        name = name.strip()
        if not name:
            return None
        key = normalise_name(name)
        if any(normalise_name(p.name) == key for p in self._projects):
            logger.debug("Ignoring duplicate project name %r", name)
            return None
        project = Project(id=mint_id(name, self._issued), name=name)
        self._issued.add(project.id)
        self._projects.append(project)
        self._changed()
        logger.info("Added project %s (%r)", project.id, project.name)
        return project

    def delete_project(self, project_id: int) -> None:
        if self.get_project(project_id) is None:
            return
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.project_id != project_id]
        self._projects = [p for p in self._projects if p.id != project_id]
        self._changed()
        logger.info(
            "Deleted project %s and %d time entries",
            project_id,
            before - len(self._entries),
        )

    # --- Time entries ---
    def add_time_entry(
        self,
        project_id: int,
        task_description: str,
        hours: float,
        date: str,
    ) -> TimeEntry:
        entry = TimeEntry(
            id=mint_id(task_description + date, self._issued),
            project_id=project_id,
            task_description=task_description,
            hours=hours,
            date=date,
        )
        self._issued.add(entry.id)
        self._entries.insert(0, entry)
        self._changed()
        logger.info("Logged %.2f hours on project %s (entry %s)", hours, project_id, entry.id)
        return entry

    def delete_time_entry(self, entry_id: int) -> None:
        remaining = [e for e in self._entries if e.id != entry_id]
        if len(remaining) == len(self._entries):
            return
        self._entries = remaining
        self._changed()
        logger.info("Deleted time entry %s", entry_id)

    # --- Summary ---
    def compute_summary(self) -> List[ProjectSummary]:
        if self._summary_cache is not None and self._summary_cache[0] == self._revision:
            return list(self._summary_cache[1])
        totals = {p.id: 0.0 for p in self._projects}
        for entry in self._entries:
            if entry.project_id in totals:
                totals[entry.project_id] += entry.hours
        # sorted() is stable, so equal totals keep project order
        summary = sorted(
            (ProjectSummary(p.id, p.name, totals[p.id]) for p in self._projects),
            key=lambda s: s.total_hours,
            reverse=True,
        )
        self._summary_cache = (self._revision, summary)
        return list(summary)
