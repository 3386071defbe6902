import pendulum
import pytest

from factories import make_cables, make_hourly, make_project
from solarwork.service.forecast import (
    completed_tables,
    forecast_completion,
    project_progress,
)

TODAY = pendulum.date(2024, 5, 10)
DAY_1 = pendulum.date(2024, 5, 6)
DAY_2 = pendulum.date(2024, 5, 7)


class TestForecastCompletion:
    def test_two_of_four_tables_in_two_days(self):
        entries = [
            make_cables(["w"], "1", day=DAY_1),
            make_cables(["w"], "2", day=DAY_2),
        ]
        forecast = forecast_completion(["1", "2", "3", "4"], entries, today=TODAY)

        assert forecast["completed_tables"] == 2
        assert forecast["unique_days_worked"] == 2
        assert forecast["tables_per_day"] == pytest.approx(1.0)
        assert forecast["remaining_days"] == 2
        assert forecast["completion_date"] == pendulum.date(2024, 5, 12)
        assert forecast["has_forecast"] is True

    def test_complete_project_finishes_today(self):
        entries = [make_cables(["w"], "1", day=DAY_1), make_cables(["w"], "2", day=DAY_1)]
        forecast = forecast_completion(["1", "2"], entries, today=TODAY)
        assert forecast["remaining_days"] == 0
        assert forecast["completion_date"] == TODAY
        assert forecast["has_forecast"] is True

    def test_no_tables_at_all(self):
        forecast = forecast_completion([], [], today=TODAY)
        assert forecast["remaining_days"] == 0
        assert forecast["completion_date"] == TODAY

    def test_no_velocity_means_no_forecast(self):
        forecast = forecast_completion(["1", "2"], [make_hourly(["w"])], today=TODAY)
        assert forecast["tables_per_day"] == 0
        assert forecast["remaining_days"] is None
        assert forecast["completion_date"] is None
        assert forecast["has_forecast"] is False

    def test_remaining_days_round_up(self):
        entries = [
            make_cables(["w"], "1", day=DAY_1),
            make_cables(["w"], "2", day=DAY_1),
            make_cables(["w"], "3", day=DAY_2),
        ]
        forecast = forecast_completion([str(i) for i in range(1, 9)], entries, today=TODAY)
        # 3 tables in 2 days, 5 left
        assert forecast["tables_per_day"] == pytest.approx(1.5)
        assert forecast["remaining_days"] == 4

    def test_relogging_a_table_counts_once(self):
        entries = [
            make_cables(["w"], "1", day=DAY_1),
            make_cables(["w"], "1", day=DAY_2),
        ]
        forecast = forecast_completion(["1", "2"], entries, today=TODAY)
        assert forecast["completed_tables"] == 1

    def test_tables_outside_the_universe_are_ignored(self):
        entries = [make_cables(["w"], "99", day=DAY_1)]
        forecast = forecast_completion(["1", "2"], entries, today=TODAY)
        assert forecast["completed_tables"] == 0


def test_completed_tables_in_logging_order():
    entries = [
        make_cables(["w"], "3", day=DAY_2),
        make_cables(["w"], "1", day=DAY_1),
        make_cables(["w"], "3", day=DAY_1, start_hour=12),
    ]
    assert completed_tables(entries) == ["1", "3"]


def test_project_progress_only_counts_own_entries():
    project = make_project("Site", id="p1", tables=["1", "2", "3", "4"])
    entries = [
        make_cables(["w"], "1", project_id="p1"),
        make_cables(["w"], "2", project_id="other"),
    ]
    progress = project_progress(project, entries)
    assert progress["completed_tables"] == 1
    assert progress["remaining_tables"] == ["2", "3", "4"]
    assert progress["percent_complete"] == pytest.approx(25.0)


def test_project_progress_without_tables():
    progress = project_progress(make_project("Empty", id="p1"), [])
    assert progress["percent_complete"] == 0.0
