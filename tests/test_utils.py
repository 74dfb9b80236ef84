from hourlog.models import ProjectSummary
from hourlog.utils import bar_fractions, format_date, format_hours


def test_format_hours():
    assert format_hours(3) == "3.0"
    assert format_hours(4.25) == "4.2"
    assert format_hours(0.0) == "0.0"


def test_format_date():
    assert format_date("2025-06-20") == "06-20-2025"
    assert format_date("not a date") == "not a date"


def test_bar_fractions_scale_to_largest_total():
    summary = [ProjectSummary(1, "A", 8.0), ProjectSummary(2, "B", 2.0), ProjectSummary(3, "C", 0.0)]
    assert bar_fractions(summary) == [1.0, 0.25, 0.0]


def test_bar_fractions_never_scale_below_one_hour():
    assert bar_fractions([ProjectSummary(1, "A", 0.5)]) == [0.5]
    assert bar_fractions([ProjectSummary(1, "A", 0.0)]) == [0.0]
    assert bar_fractions([]) == []
