from datetime import date

import pytest

from hourlog.forms import (
    DUPLICATE_PROJECT_NAME,
    EMPTY_PROJECT_NAME,
    INVALID_DATE,
    INVALID_HOURS,
    REQUIRED_FIELDS,
    ProjectForm,
    TimeLogForm,
    ValidationError,
    parse_hours,
    validate_project_name,
    validate_time_entry,
)
from hourlog.models import Project
from hourlog.session import DASHBOARD, LOG_TIME


def filled_form(**overrides):
    values = dict(project_id=1, task_description="Write tests", hours="2.5", date="2025-06-21")
    values.update(overrides)
    return TimeLogForm(**values)


class TestTimeEntryValidation:
    def test_valid_input_is_converted(self):
        assert validate_time_entry(1, " Write tests ", "2.5", "2025-06-21") == (
            1,
            "Write tests",
            2.5,
            "2025-06-21",
        )

    @pytest.mark.parametrize(
        "project_id, task, hours, day",
        [
            (None, "task", "1", "2025-06-21"),
            (1, "", "1", "2025-06-21"),
            (1, "   ", "1", "2025-06-21"),
            (1, "task", "", "2025-06-21"),
            (1, "task", "1", ""),
        ],
    )
    def test_missing_fields(self, project_id, task, hours, day):
        with pytest.raises(ValidationError, match=REQUIRED_FIELDS):
            validate_time_entry(project_id, task, hours, day)

    @pytest.mark.parametrize("raw", ["0", "-1", "25", "24.01", "abc", "nan", "inf"])
    def test_hours_out_of_range(self, raw):
        with pytest.raises(ValidationError) as excinfo:
            parse_hours(raw)
        assert str(excinfo.value) == INVALID_HOURS

    @pytest.mark.parametrize("raw, expected", [("0.1", 0.1), ("24", 24.0), ("7.5", 7.5)])
    def test_hours_in_range(self, raw, expected):
        assert parse_hours(raw) == expected

    @pytest.mark.parametrize("day", ["21/06/2025", "2025-13-01", "yesterday"])
    def test_bad_date(self, day):
        with pytest.raises(ValidationError) as excinfo:
            validate_time_entry(1, "task", "1", day)
        assert str(excinfo.value) == INVALID_DATE

    def test_validation_error_is_a_value_error(self):
        assert issubclass(ValidationError, ValueError)


class TestTimeLogForm:
    def test_defaults_to_first_project_and_today(self):
        form = TimeLogForm.for_projects([Project(7, "X"), Project(8, "Y")], today=date(2025, 6, 21))
        assert form.project_id == 7
        assert form.date == "2025-06-21"
        assert form.task_description == ""
        assert form.hours == ""

    def test_no_projects_means_no_selection(self):
        form = TimeLogForm.for_projects([])
        assert form.project_id is None
        assert form.date == date.today().isoformat()

    @pytest.mark.parametrize("hours", ["0", "25"])
    def test_rejected_hours_leave_entries_unchanged(self, session, hours):
        before = session.time_entries()
        form = filled_form(hours=hours)
        assert form.submit(session) is None
        assert form.error == INVALID_HOURS
        assert session.time_entries() == before
        # Input is kept so the user can correct it
        assert form.hours == hours
        assert form.task_description == "Write tests"

    def test_missing_field_message(self, session):
        form = filled_form(task_description="")
        assert form.submit(session) is None
        assert form.error == REQUIRED_FIELDS

    def test_success_logs_entry_and_resets_fields(self, session):
        session.navigate(LOG_TIME)
        form = filled_form(project_id=2, error="old message")
        entry = form.submit(session)
        assert entry is not None
        assert (entry.project_id, entry.task_description, entry.hours, entry.date) == (
            2,
            "Write tests",
            2.5,
            "2025-06-21",
        )
        assert session.time_entries()[0] == entry
        assert session.page == DASHBOARD
        assert form.error == ""
        assert form.task_description == ""
        assert form.hours == ""
        # Project and date are kept for the next entry
        assert form.project_id == 2
        assert form.date == "2025-06-21"

    def test_sync_projects_after_delete(self, session):
        form = filled_form(project_id=1)
        session.delete_project(1)
        form.sync_projects(session.projects())
        assert form.project_id == 2
        session.delete_project(2)
        form.sync_projects(session.projects())
        assert form.project_id is None

    def test_sync_projects_keeps_existing_selection(self, session):
        form = filled_form(project_id=2)
        form.sync_projects(session.projects())
        assert form.project_id == 2


class TestProjectForm:
    def test_trimmed_name(self):
        assert validate_project_name("  New  ", [Project(1, "Old")]) == "New"

    def test_empty_name(self, session):
        form = ProjectForm(name="   ")
        assert form.submit(session) is None
        assert form.error == EMPTY_PROJECT_NAME
        assert len(session.projects()) == 2

    def test_duplicate_name_any_case(self, session):
        session.add_project("alpha")
        form = ProjectForm(name="Alpha")
        assert form.submit(session) is None
        assert form.error == DUPLICATE_PROJECT_NAME
        assert form.name == "Alpha"
        assert [p.name for p in session.projects()] == ["A", "B", "alpha"]

    def test_success_clears_input_and_error(self, session):
        form = ProjectForm(name=" Gamma ", error=EMPTY_PROJECT_NAME)
        project = form.submit(session)
        assert project is not None
        assert project.name == "Gamma"
        assert session.projects()[-1] == project
        assert form.name == ""
        assert form.error == ""
