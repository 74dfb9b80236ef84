"""User interface for the hourlog time tracker.

This module builds the primary customtkinter window: a sidebar with
navigation to the dashboard, the time entry form and the project
manager, a header naming the current screen, and a content area that is
rebuilt whenever the screen changes.  On narrow windows the sidebar
collapses behind a menu button in the header.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

import customtkinter as ctk

from hourlog.config import Settings
from hourlog.dashboard import DashboardView
from hourlog.data import MemoryBackend
from hourlog.forms import TimeLogForm
from hourlog.log_time import TimeLogView
from hourlog.project_manager import ProjectManagerView
from hourlog.session import DASHBOARD, LOG_TIME, MANAGE_PROJECTS, PAGE_TITLES, TrackerSession

logger = logging.getLogger(__name__)

ACTIVE_COLOR = ("#1f6aa5", "#144870")
INACTIVE_COLOR = "transparent"


class TimeTrackerApp(ctk.CTk):
    """Main application window for the time tracker."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[TrackerSession] = None) -> None:
        super().__init__()
        self.settings = settings or Settings.from_env()
        if session is None:
            backend = MemoryBackend.with_seed_data() if self.settings.seed_demo_data else MemoryBackend()
            session = TrackerSession(backend, recent_entry_limit=self.settings.recent_entry_limit)
        self.session = session
        # Kept across visits so the last project and date stay selected
        self.log_form: Optional[TimeLogForm] = None

        self.title(self.settings.title)
        self.geometry(self.settings.geometry)

        # Appearance mode (light/dark)
        ctk.set_appearance_mode(self.settings.appearance_mode)

        # Sidebar for navigation
        self.sidebar = ctk.CTkFrame(self, width=200, corner_radius=0)
        self.sidebar.pack(side="left", fill="y")
        self.sidebar_visible = True

        # Main content area
        self.main = ctk.CTkFrame(self)
        self.main.pack(side="right", expand=True, fill="both")

        self.nav_buttons: Dict[str, ctk.CTkButton] = {}
        self.build_sidebar()
        self.build_header()

        self.content = ctk.CTkFrame(self.main, fg_color="transparent")
        self.content.pack(expand=True, fill="both")

        self.bind("<Configure>", self._on_resize)
        self.protocol("WM_DELETE_WINDOW", self.on_exit)
        self.show_page()

    def build_sidebar(self) -> None:
        """Create navigation buttons and appearance mode selector."""
        label = ctk.CTkLabel(self.sidebar, text="Time Tracker", font=ctk.CTkFont(size=18, weight="bold"))
        label.pack(pady=20, padx=20)

        for page in (DASHBOARD, LOG_TIME, MANAGE_PROJECTS):
            btn = ctk.CTkButton(
                self.sidebar,
                text=PAGE_TITLES[page],
                anchor="w",
                command=lambda p=page: self.navigate(p),
            )
            btn.pack(pady=5, padx=10, fill="x")
            self.nav_buttons[page] = btn

        # Appearance mode selector
        mode_frame = ctk.CTkFrame(self.sidebar)
        mode_frame.pack(pady=10, padx=10, fill="x")
        ctk.CTkLabel(mode_frame, text="Mode:").pack(side="left")
        self.mode_var = ctk.StringVar(value=self.settings.appearance_mode)
        mode_menu = ctk.CTkOptionMenu(mode_frame, variable=self.mode_var, values=["light", "dark"], command=self._set_mode)
        mode_menu.pack(side="left", padx=5)

        # Exit button
        btn_exit = ctk.CTkButton(
            self.sidebar,
            text="Exit",
            fg_color="#c72626",
            hover_color="#d23b3b",
            command=self.on_exit,
        )
        btn_exit.pack(pady=(20, 5), padx=10, fill="x")

    def build_header(self) -> None:
        header = ctk.CTkFrame(self.main, height=50)
        header.pack(side="top", fill="x")
        self.menu_btn = ctk.CTkButton(header, text="☰", width=40, command=self.toggle_menu)
        self.header_label = ctk.CTkLabel(header, text="", font=ctk.CTkFont(size=20, weight="bold"))
        self.header_label.pack(side="left", padx=15, pady=10)

    def _set_mode(self, mode: str) -> None:
        """Change the global appearance mode."""
        if mode.lower() == "dark":
            ctk.set_appearance_mode("dark")
        else:
            ctk.set_appearance_mode("light")

    # --- Navigation ---
    def navigate(self, page: str) -> None:
        self.session.navigate(page)
        self.show_page()

    def show_page(self) -> None:
        """Replace the content area with the session's current screen."""
        for widget in self.content.winfo_children():
            widget.destroy()

        page = self.session.page
        if page == LOG_TIME:
            if self.log_form is None:
                self.log_form = TimeLogForm.for_projects(self.session.projects())
            view: ctk.CTkFrame = TimeLogView(self.content, self.session, on_saved=self.show_page, form=self.log_form)
        elif page == MANAGE_PROJECTS:
            view = ProjectManagerView(self.content, self.session)
        else:
            view = DashboardView(self.content, self.session)
        view.pack(expand=True, fill="both", padx=10, pady=10)

        self.header_label.configure(text=self.session.page_title)
        for name, btn in self.nav_buttons.items():
            btn.configure(fg_color=ACTIVE_COLOR if name == page else INACTIVE_COLOR)
        self._layout_sidebar()
        logger.debug("Showing %s", page)

    # --- Compact layout ---
    def toggle_menu(self) -> None:
        self.session.toggle_menu()
        self._layout_sidebar()

    def _is_compact(self) -> bool:
        return self.winfo_width() < self.settings.compact_width

    def _on_resize(self, event) -> None:
        if event.widget is self:
            self._layout_sidebar()

    def _layout_sidebar(self) -> None:
        """Show or hide the sidebar and menu button for the current width."""
        compact = self._is_compact()
        show_sidebar = not compact or self.session.menu_open
        if show_sidebar and not self.sidebar_visible:
            self.sidebar.pack(side="left", fill="y", before=self.main)
        elif not show_sidebar and self.sidebar_visible:
            self.sidebar.pack_forget()
        self.sidebar_visible = show_sidebar

        if compact:
            self.menu_btn.pack(side="left", padx=(10, 0), pady=10, before=self.header_label)
        else:
            self.menu_btn.pack_forget()

    def on_exit(self) -> None:
        """Close the application; in-memory state is discarded."""
        logger.info(
            "Exiting with %d projects and %d time entries",
            len(self.session.projects()),
            len(self.session.time_entries()),
        )
        self.destroy()
