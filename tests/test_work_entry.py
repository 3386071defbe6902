import pendulum
import pytest

from factories import make_cables, make_hourly, make_paneling, make_project, make_worker
from solarwork.errors import WorkEntryValidationError
from solarwork.service.work_entry import (
    create_cables_entries,
    create_construction_entry,
    create_hourly_entry,
    create_paneling_entry,
    remove_worker_from_entries,
    update_work_entry,
)

START = pendulum.datetime(2024, 5, 6, 8, tz="UTC")
END = pendulum.datetime(2024, 5, 6, 10, 30, tz="UTC")


@pytest.fixture
def project():
    return make_project("Site", id="p1", tables=["1", "2", "3"])


@pytest.fixture
def workers():
    return [
        make_worker("A", id="a"),
        make_worker("B", id="b"),
        make_worker("C", id="c"),
    ]


class TestCreate:
    def test_hourly_entry_duration(self, project, workers):
        entry = create_hourly_entry(project, workers, ["a"], START, END, "cleanup")
        assert entry["duration"] == pytest.approx(2.5)
        assert entry["project_id"] == "p1"
        assert entry["type"] == "hourly"
        assert entry["description"] == "cleanup"

    def test_paneling_modules_per_hour(self, project, workers):
        entry = create_paneling_entry(project, workers, ["a", "b"], START, END, 50)
        assert entry["modules_per_hour"] == pytest.approx(20.0)
        assert entry["sub_type"] == "paneling"

    @pytest.mark.parametrize("module_count", [0, -3, None])
    def test_paneling_requires_modules(self, project, workers, module_count):
        with pytest.raises(WorkEntryValidationError):
            create_paneling_entry(project, workers, ["a"], START, END, module_count)

    def test_construction_requires_description(self, project, workers):
        with pytest.raises(WorkEntryValidationError):
            create_construction_entry(project, workers, ["a"], START, END, "  ")

    def test_construction_entry(self, project, workers):
        entry = create_construction_entry(project, workers, ["a"], START, END, " rails ")
        assert entry["description"] == "rails"


class TestValidation:
    def test_end_before_start(self, project, workers):
        with pytest.raises(WorkEntryValidationError, match="after start"):
            create_hourly_entry(project, workers, ["a"], END, START)

    def test_end_equal_to_start(self, project, workers):
        with pytest.raises(WorkEntryValidationError):
            create_hourly_entry(project, workers, ["a"], START, START)

    def test_missing_times(self, project, workers):
        with pytest.raises(WorkEntryValidationError):
            create_hourly_entry(project, workers, ["a"], None, END)

    def test_more_than_two_workers(self, project, workers):
        with pytest.raises(WorkEntryValidationError, match="at most 2"):
            create_hourly_entry(project, workers, ["a", "b", "c"], START, END)

    def test_configured_worker_cap(self, project, workers):
        entry = create_hourly_entry(
            project, workers, ["a", "b", "c"], START, END, max_workers=3
        )
        assert len(entry["worker_ids"]) == 3

    def test_no_workers(self, project, workers):
        with pytest.raises(WorkEntryValidationError):
            create_hourly_entry(project, workers, [], START, END)

    def test_duplicate_worker(self, project, workers):
        with pytest.raises(WorkEntryValidationError):
            create_hourly_entry(project, workers, ["a", "a"], START, END)

    def test_unknown_worker(self, project, workers):
        with pytest.raises(WorkEntryValidationError, match="ghost"):
            create_hourly_entry(project, workers, ["ghost"], START, END)


class TestCables:
    def test_one_entry_per_table(self, project, workers):
        entries = create_cables_entries(
            project, workers, ["a", "b"], START, END, {"1": "small", "2": "large"}, []
        )
        assert [e["table"] for e in entries] == ["1", "2"]
        assert [e["table_size"] for e in entries] == ["small", "large"]
        assert all(e["worker_ids"] == ["a", "b"] for e in entries)

    def test_table_outside_project(self, project, workers):
        with pytest.raises(WorkEntryValidationError, match="not part of project"):
            create_cables_entries(project, workers, ["a"], START, END, {"9": "small"}, [])

    def test_completed_table_is_rejected(self, project, workers):
        existing = [make_cables(["a"], "1", project_id="p1")]
        with pytest.raises(WorkEntryValidationError, match="already completed"):
            create_cables_entries(
                project, workers, ["a"], START, END, {"1": "small"}, existing
            )

    def test_table_done_in_another_project_is_allowed(self, project, workers):
        existing = [make_cables(["a"], "1", project_id="elsewhere")]
        entries = create_cables_entries(
            project, workers, ["a"], START, END, {"1": "small"}, existing
        )
        assert len(entries) == 1

    def test_unknown_size(self, project, workers):
        with pytest.raises(WorkEntryValidationError, match="Unknown table size"):
            create_cables_entries(project, workers, ["a"], START, END, {"1": "huge"}, [])

    def test_no_tables(self, project, workers):
        with pytest.raises(WorkEntryValidationError):
            create_cables_entries(project, workers, ["a"], START, END, {}, [])


class TestUpdate:
    def test_recomputes_duration_and_velocity(self, workers):
        entry = make_paneling(["a"], 40, hours=4.0)
        updated = update_work_entry(
            entry, workers, end_time=entry["start_time"].add(hours=2), module_count=60
        )
        assert updated["duration"] == pytest.approx(2.0)
        assert updated["modules_per_hour"] == pytest.approx(30.0)
        assert entry["module_count"] == 40

    def test_rejects_field_of_other_variant(self, workers):
        with pytest.raises(WorkEntryValidationError):
            update_work_entry(make_hourly(["a"]), workers, table_size="small")

    def test_rejects_inverted_times(self, workers):
        entry = make_hourly(["a"])
        with pytest.raises(WorkEntryValidationError):
            update_work_entry(entry, workers, end_time=entry["start_time"])

    def test_changes_workers(self, workers):
        updated = update_work_entry(make_hourly(["a"]), workers, worker_ids=["b", "c"])
        assert updated["worker_ids"] == ["b", "c"]


def test_remove_worker_from_entries():
    alone = make_hourly(["a"], id="alone")
    shared = make_hourly(["a", "b"], id="shared")
    other = make_hourly(["b"], id="other")

    entries, removed = remove_worker_from_entries([alone, shared, other], "a")

    assert removed == 1
    assert [e["id"] for e in entries] == ["shared", "other"]
    assert entries[0]["worker_ids"] == ["b"]
    assert shared["worker_ids"] == ["a", "b"]
