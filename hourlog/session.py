"""Application state for the hourlog time tracker.

The ``TrackerSession`` owns the backend together with the UI state that
is not a widget concern: which screen is showing and whether the
collapsed navigation menu is open.  Screens receive the session and
call its methods; they never touch the backend directly.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from hourlog.data import MemoryBackend, TimeBackend
from hourlog.models import Project, ProjectSummary, TimeEntry

logger = logging.getLogger(__name__)

DASHBOARD = "dashboard"
LOG_TIME = "log"
MANAGE_PROJECTS = "manage"

PAGE_TITLES = {
    DASHBOARD: "Dashboard",
    LOG_TIME: "Log Time",
    MANAGE_PROJECTS: "Manage Projects",
}

UNKNOWN_PROJECT = "Unknown Project"


class TrackerSession:
    """Single‑user, in‑memory state shared by the shell and its screens."""

    def __init__(self, backend: Optional[TimeBackend] = None, recent_entry_limit: int = 5) -> None:
        self.backend: TimeBackend = backend if backend is not None else MemoryBackend()
        self.recent_entry_limit = recent_entry_limit
        self.page: str = DASHBOARD
        self.menu_open: bool = False

    # --- Navigation ---
    @property
    def page_title(self) -> str:
        return PAGE_TITLES[self.page]

    def navigate(self, page: str) -> None:
        """Switch to ``page``; unknown names land on the dashboard."""
        if page not in PAGE_TITLES:
            logger.warning("Unknown page %r, showing dashboard", page)
            page = DASHBOARD
        self.page = page
        self.close_menu()

    def toggle_menu(self) -> None:
        self.menu_open = not self.menu_open

    def close_menu(self) -> None:
        self.menu_open = False

    # --- Reads ---
    def projects(self) -> List[Project]:
        return self.backend.projects()

    def time_entries(self) -> List[TimeEntry]:
        return self.backend.time_entries()

    def summary(self) -> List[ProjectSummary]:
        return self.backend.compute_summary()

    def recent_entries(self) -> List[TimeEntry]:
        return self.backend.time_entries()[: self.recent_entry_limit]

    def project_name(self, project_id: int) -> str:
        project = self.backend.get_project(project_id)
        return project.name if project is not None else UNKNOWN_PROJECT

    # --- Mutations ---
    def add_project(self, name: str) -> Optional[Project]:
        return self.backend.add_project(name)

    def delete_project(self, project_id: int) -> None:
        self.backend.delete_project(project_id)

    def add_time_entry(
        self,
        project_id: int,
        task_description: str,
        hours: float,
        date: str,
    ) -> TimeEntry:
        """Record an entry and return to the dashboard so it shows up."""
        entry = self.backend.add_time_entry(project_id, task_description, hours, date)
        self.navigate(DASHBOARD)
        return entry

    def delete_time_entry(self, entry_id: int) -> None:
        self.backend.delete_time_entry(entry_id)
