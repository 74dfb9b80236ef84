"""Time entry screen for the hourlog time tracker.

The ``TimeLogView`` collects a project, task description, hours and date
and hands them to ``hourlog.forms.TimeLogForm``.  On success the session
switches back to the dashboard and ``on_saved`` lets the shell redraw.
"""
from __future__ import annotations

from typing import Callable, Dict, Optional

import customtkinter as ctk

from hourlog.forms import TimeLogForm
from hourlog.session import TrackerSession

NO_PROJECTS = "Please add a project first"


class TimeLogView(ctk.CTkFrame):
    """Form for logging a new time entry."""

    def __init__(
        self,
        parent: ctk.CTkBaseClass,
        session: TrackerSession,
        on_saved: Callable[[], None],
        form: Optional[TimeLogForm] = None,
    ) -> None:
        super().__init__(parent)
        self.session = session
        self.on_saved = on_saved
        self.form = form or TimeLogForm.for_projects(session.projects())
        self.form.sync_projects(session.projects())
        # Option menu shows names; map them back to ids on submit
        self.project_ids: Dict[str, int] = {p.name: p.id for p in session.projects()}

        ctk.CTkLabel(self, text="Log New Time Entry", font=ctk.CTkFont(size=18, weight="bold")).pack(
            anchor="w", padx=20, pady=(20, 10)
        )
        self.error_label = ctk.CTkLabel(self, text="", text_color="#c72626")
        self.error_label.pack(anchor="w", padx=20)

        self._build_fields()

        submit_btn = ctk.CTkButton(self, text="Log Time", command=self.submit)
        submit_btn.pack(fill="x", padx=20, pady=20)

    def _row(self, label: str) -> ctk.CTkFrame:
        row = ctk.CTkFrame(self, fg_color="transparent")
        row.pack(fill="x", padx=20, pady=5)
        ctk.CTkLabel(row, text=label, width=140, anchor="w").pack(side="left")
        return row

    def _build_fields(self) -> None:
        row = self._row("Project")
        names = list(self.project_ids)
        current = next(
            (name for name, pid in self.project_ids.items() if pid == self.form.project_id),
            names[0] if names else NO_PROJECTS,
        )
        self.project_var = ctk.StringVar(value=current)
        project_menu = ctk.CTkOptionMenu(row, variable=self.project_var, values=names or [NO_PROJECTS])
        if not names:
            project_menu.configure(state="disabled")
        project_menu.pack(side="left", fill="x", expand=True)

        row = self._row("Task Description")
        self.task_entry = ctk.CTkEntry(row, placeholder_text="e.g., Developed the login feature")
        self.task_entry.pack(side="left", fill="x", expand=True)

        row = self._row("Hours Worked")
        self.hours_entry = ctk.CTkEntry(row, placeholder_text="e.g., 2.5")
        self.hours_entry.pack(side="left", fill="x", expand=True)

        row = self._row("Date (YYYY-MM-DD)")
        self.date_entry = ctk.CTkEntry(row)
        self.date_entry.pack(side="left", fill="x", expand=True)

        self._load_form()

    def _load_form(self) -> None:
        """Copy form values into the entry widgets."""
        for widget, value in (
            (self.task_entry, self.form.task_description),
            (self.hours_entry, self.form.hours),
            (self.date_entry, self.form.date),
        ):
            widget.delete(0, "end")
            if value:
                widget.insert(0, value)
        self.error_label.configure(text=self.form.error)

    def submit(self) -> None:
        self.form.project_id = self.project_ids.get(self.project_var.get())
        self.form.task_description = self.task_entry.get()
        self.form.hours = self.hours_entry.get()
        self.form.date = self.date_entry.get()
        entry = self.form.submit(self.session)
        self._load_form()
        if entry is not None:
            self.on_saved()
