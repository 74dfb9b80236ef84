"""
Form state and input validation for the hourlog screens.

The customtkinter screens copy their widget values into these objects
and call ``submit``.  Validation problems are reported through the
``error`` attribute as a single human readable message, and nothing is
written to the session until the input is valid.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date as Date
from typing import Iterable, Optional

from hourlog.data import normalise_name
from hourlog.models import Project, TimeEntry
from hourlog.session import TrackerSession

MAX_HOURS = 24.0

REQUIRED_FIELDS = "All fields are required."
INVALID_HOURS = "Hours must be a positive number, up to 24."
INVALID_DATE = "Date must be in YYYY-MM-DD format."
EMPTY_PROJECT_NAME = "Project name cannot be empty."
DUPLICATE_PROJECT_NAME = "A project with this name already exists."


class ValidationError(ValueError):
    """Raised when form input cannot be accepted."""


def parse_hours(raw: str) -> float:
    try:
        hours = float(raw)
    except ValueError:
        raise ValidationError(INVALID_HOURS) from None
    # NaN fails both comparisons
    if not 0 < hours <= MAX_HOURS:
        raise ValidationError(INVALID_HOURS)
    return hours


def parse_date(raw: str) -> str:
    try:
        return Date.fromisoformat(raw).isoformat()
    except ValueError:
        raise ValidationError(INVALID_DATE) from None


def validate_time_entry(
    project_id: Optional[int],
    task_description: str,
    hours: str,
    date: str,
) -> tuple[int, str, float, str]:
    """
    Check the raw time‑log inputs and return them converted.

    :return: ``(project_id, task_description, hours, date)`` ready for
        ``TrackerSession.add_time_entry``.
    :raises ValidationError: with the message to show the user.
    """
    task_description = task_description.strip()
    hours = hours.strip()
    date = date.strip()
    if project_id is None or not task_description or not hours or not date:
        raise ValidationError(REQUIRED_FIELDS)
    return project_id, task_description, parse_hours(hours), parse_date(date)


def validate_project_name(name: str, projects: Iterable[Project]) -> str:
    """Return the trimmed name, or raise if it is blank or already used."""
    name = name.strip()
    if not name:
        raise ValidationError(EMPTY_PROJECT_NAME)
    key = normalise_name(name)
    if any(normalise_name(p.name) == key for p in projects):
        raise ValidationError(DUPLICATE_PROJECT_NAME)
    return name


@dataclass
class TimeLogForm:
    project_id: Optional[int] = None
    task_description: str = ""
    hours: str = ""
    date: str = ""
    error: str = ""

    @classmethod
    def for_projects(cls, projects: Iterable[Project], today: Optional[Date] = None) -> "TimeLogForm":
        """New form defaulting to the first project and today's date."""
        first = next(iter(projects), None)
        return cls(
            project_id=first.id if first is not None else None,
            date=(today or Date.today()).isoformat(),
        )

    def sync_projects(self, projects: Iterable[Project]) -> None:
        """Fall back to the first project if the selected one was deleted."""
        ids = [p.id for p in projects]
        if self.project_id not in ids:
            self.project_id = ids[0] if ids else None

    def submit(self, session: TrackerSession) -> Optional[TimeEntry]:
        try:
            values = validate_time_entry(self.project_id, self.task_description, self.hours, self.date)
        except ValidationError as exc:
            self.error = str(exc)
            return None
        self.error = ""
        # Keep project and date for the next entry on the same day
        self.task_description = ""
        self.hours = ""
        return session.add_time_entry(*values)


@dataclass
class ProjectForm:
    name: str = ""
    error: str = ""

    def submit(self, session: TrackerSession) -> Optional[Project]:
        try:
            name = validate_project_name(self.name, session.projects())
        except ValidationError as exc:
            self.error = str(exc)
            return None
        self.error = ""
        self.name = ""
        return session.add_project(name)
