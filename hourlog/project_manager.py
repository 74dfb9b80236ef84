"""Project management screen for the hourlog time tracker.

Lets the user add projects and delete existing ones.  Deleting a project
also removes every time entry logged against it.
"""
from __future__ import annotations

import customtkinter as ctk

from hourlog.forms import ProjectForm
from hourlog.models import Project
from hourlog.session import TrackerSession


class ProjectManagerView(ctk.CTkFrame):
    """Add and delete projects."""

    def __init__(self, parent: ctk.CTkBaseClass, session: TrackerSession) -> None:
        super().__init__(parent, fg_color="transparent")
        self.session = session
        self.form = ProjectForm()

        self._build_add_panel()
        self.list_frame = ctk.CTkScrollableFrame(self, label_text="Existing Projects")
        self.list_frame.pack(fill="both", expand=True, padx=10, pady=(5, 10))
        self.refresh_projects()

    def _build_add_panel(self) -> None:
        panel = ctk.CTkFrame(self)
        panel.pack(fill="x", padx=10, pady=(10, 5))
        ctk.CTkLabel(panel, text="Add New Project", font=ctk.CTkFont(size=16, weight="bold")).pack(
            anchor="w", padx=10, pady=(10, 5)
        )
        self.error_label = ctk.CTkLabel(panel, text="", text_color="#c72626")
        self.error_label.pack(anchor="w", padx=10)

        row = ctk.CTkFrame(panel, fg_color="transparent")
        row.pack(fill="x", padx=10, pady=(0, 10))
        self.name_entry = ctk.CTkEntry(row, placeholder_text="Enter new project name")
        self.name_entry.pack(side="left", fill="x", expand=True)
        self.name_entry.bind("<Return>", lambda _event: self.add_project())
        add_btn = ctk.CTkButton(
            row,
            text="Add Project",
            fg_color="#2e8b57",
            hover_color="#3aa36a",
            command=self.add_project,
        )
        add_btn.pack(side="left", padx=(5, 0))

    def refresh_projects(self) -> None:
        for widget in self.list_frame.winfo_children():
            widget.destroy()
        projects = self.session.projects()
        if not projects:
            ctk.CTkLabel(
                self.list_frame,
                text="No projects found. Add one above to get started.",
                text_color="gray",
            ).pack(pady=20)
            return
        for project in projects:
            self._add_project_row(project)

    def _add_project_row(self, project: Project) -> None:
        frame = ctk.CTkFrame(self.list_frame)
        frame.pack(fill="x", pady=2)
        ctk.CTkLabel(frame, text=project.name, anchor="w").pack(side="left", padx=10)
        del_btn = ctk.CTkButton(
            frame,
            text="Delete",
            width=70,
            fg_color="#c72626",
            hover_color="#d23b3b",
            command=lambda pid=project.id: self._delete_project(pid),
        )
        del_btn.pack(side="right", padx=5, pady=3)

    def add_project(self) -> None:
        self.form.name = self.name_entry.get()
        project = self.form.submit(self.session)
        self.error_label.configure(text=self.form.error)
        if project is not None:
            self.name_entry.delete(0, "end")
            self.refresh_projects()

    def _delete_project(self, project_id: int) -> None:
        self.session.delete_project(project_id)
        self.refresh_projects()
