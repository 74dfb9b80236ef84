"""Dashboard screen for the hourlog time tracker.

Shows the hours logged per project, largest first, with a bar for each
project scaled against the busiest one, followed by a table of the most
recent time entries.  Entries can be deleted straight from the table.
"""
from __future__ import annotations

import customtkinter as ctk

from hourlog.models import TimeEntry
from hourlog.session import TrackerSession
from hourlog.utils import bar_fractions, format_date, format_hours

ENTRY_COLUMNS = [
    ("Project", 200),
    ("Task", 260),
    ("Hours", 60),
    ("Date", 90),
]


class DashboardView(ctk.CTkFrame):
    """Project summary and recent entries."""

    def __init__(self, parent: ctk.CTkBaseClass, session: TrackerSession) -> None:
        super().__init__(parent, fg_color="transparent")
        self.session = session

        self.summary_frame = ctk.CTkFrame(self)
        self.summary_frame.pack(fill="x", padx=10, pady=(10, 5))

        self.entries_frame = ctk.CTkScrollableFrame(self)
        self.entries_frame.pack(fill="both", expand=True, padx=10, pady=(5, 10))

        self.refresh()

    def refresh(self) -> None:
        """Rebuild both panels from the current session state."""
        for frame in (self.summary_frame, self.entries_frame):
            for widget in frame.winfo_children():
                widget.destroy()
        self._build_summary()
        self._build_entries()

    def _build_summary(self) -> None:
        title = ctk.CTkLabel(self.summary_frame, text="Project Summary", font=ctk.CTkFont(size=16, weight="bold"))
        title.pack(anchor="w", padx=10, pady=(10, 5))

        summary = self.session.summary()
        if not summary:
            ctk.CTkLabel(
                self.summary_frame,
                text='No time logged yet. Go to "Log Time" to add your first entry.',
                text_color="gray",
            ).pack(anchor="w", padx=10, pady=(0, 10))
            return

        for row, fraction in zip(summary, bar_fractions(summary)):
            line = ctk.CTkFrame(self.summary_frame, fg_color="transparent")
            line.pack(fill="x", padx=10, pady=(4, 0))
            ctk.CTkLabel(line, text=row.name, anchor="w").pack(side="left")
            ctk.CTkLabel(
                line,
                text=f"{format_hours(row.total_hours)} hrs",
                font=ctk.CTkFont(weight="bold"),
            ).pack(side="right")
            bar = ctk.CTkProgressBar(self.summary_frame, height=10)
            bar.set(fraction)
            bar.pack(fill="x", padx=10, pady=(2, 6))

    def _build_entries(self) -> None:
        title = ctk.CTkLabel(self.entries_frame, text="Recent Entries", font=ctk.CTkFont(size=16, weight="bold"))
        title.pack(anchor="w", padx=5, pady=(5, 5))

        header = ctk.CTkFrame(self.entries_frame)
        header.pack(fill="x", pady=2)
        for text, width in ENTRY_COLUMNS:
            ctk.CTkLabel(header, text=text, width=width, anchor="w").pack(side="left")
        ctk.CTkLabel(header, text="Actions", width=80).pack(side="left")

        entries = self.session.recent_entries()
        if not entries:
            ctk.CTkLabel(self.entries_frame, text="No recent entries.", text_color="gray").pack(pady=20)
            return
        for entry in entries:
            self._add_entry_row(entry)

    def _add_entry_row(self, entry: TimeEntry) -> None:
        frame = ctk.CTkFrame(self.entries_frame)
        frame.pack(fill="x", pady=1)
        values = [
            self.session.project_name(entry.project_id),
            entry.task_description,
            format_hours(entry.hours),
            format_date(entry.date),
        ]
        for val, (_, width) in zip(values, ENTRY_COLUMNS):
            ctk.CTkLabel(frame, text=val, width=width, anchor="w").pack(side="left")
        del_btn = ctk.CTkButton(
            frame,
            text="Delete",
            width=70,
            fg_color="#c72626",
            hover_color="#d23b3b",
            command=lambda eid=entry.id: self._delete_entry(eid),
        )
        del_btn.pack(side="left", padx=5)

    def _delete_entry(self, entry_id: int) -> None:
        self.session.delete_time_entry(entry_id)
        self.refresh()
