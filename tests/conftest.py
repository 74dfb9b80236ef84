import pytest

from hourlog.data import MemoryBackend
from hourlog.models import Project, TimeEntry
from hourlog.session import TrackerSession


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def two_projects():
    """Projects A and B with three entries: A gets 3 hours, B gets 5."""
    projects = [Project(1, "A"), Project(2, "B")]
    entries = [
        TimeEntry(11, 1, "first", 2.0, "2025-06-20"),
        TimeEntry(12, 2, "second", 5.0, "2025-06-20"),
        TimeEntry(13, 1, "third", 1.0, "2025-06-19"),
    ]
    return MemoryBackend(projects, entries)


@pytest.fixture
def session(two_projects):
    return TrackerSession(two_projects)


@pytest.fixture
def seeded_session():
    return TrackerSession(MemoryBackend.with_seed_data())
