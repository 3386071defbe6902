"""Backup import and export."""

import json

import pytest

from factories import make_hourly, make_project, make_worker
from solarwork import configuration
from solarwork.errors import ImportDataError
from solarwork.repository import store
from solarwork.repository.project import PROJECT_REPO
from solarwork.repository.settings import SETTINGS_REPO
from solarwork.repository.work_entry import WORK_ENTRY_REPO
from solarwork.repository.worker import WORKER_REPO
from solarwork.repository.serialize import (
    project_to_dict,
    work_entry_to_dict,
    worker_to_dict,
)
from solarwork.service.merge import (
    default_export_file_name,
    export_snapshot,
    import_snapshot,
    merge_snapshot,
    parse_payload,
    read_import_file,
    snake_case,
    write_export,
)
from solarwork.template.project import BUILTIN_PROJECT_ID, get_builtin_project


def _snapshot(projects=None, workers=None, work_entries=None):
    return {
        "projects": projects or [],
        "workers": workers or [],
        "work_entries": work_entries or [],
        "attendance_records": [],
    }


class TestMergeSnapshot:
    def test_incoming_entry_with_earlier_end_does_not_overwrite(self):
        local = make_hourly(["w"], hours=3.0, id="e1", description="local")
        incoming = make_hourly(["w"], hours=1.0, id="e1", description="incoming")

        merged = merge_snapshot(
            _snapshot(work_entries=[local]), _snapshot(work_entries=[incoming])
        )
        assert [e["description"] for e in merged["work_entries"]] == ["local"]

    def test_incoming_entry_with_later_end_wins(self):
        local = make_hourly(["w"], hours=1.0, id="e1", description="local")
        incoming = make_hourly(["w"], hours=3.0, id="e1", description="incoming")

        merged = merge_snapshot(
            _snapshot(work_entries=[local]), _snapshot(work_entries=[incoming])
        )
        assert [e["description"] for e in merged["work_entries"]] == ["incoming"]

    def test_new_entries_are_added(self):
        merged = merge_snapshot(
            _snapshot(work_entries=[make_hourly(["w"], id="e1")]),
            _snapshot(work_entries=[make_hourly(["w"], id="e2")]),
        )
        assert {e["id"] for e in merged["work_entries"]} == {"e1", "e2"}

    def test_workers_and_projects_overwrite_by_id(self):
        merged = merge_snapshot(
            _snapshot(
                projects=[make_project("Old", id="p1")],
                workers=[make_worker("Old", id="w1", rate=5.0)],
            ),
            _snapshot(
                projects=[make_project("New", id="p1")],
                workers=[make_worker("New", id="w1", rate=9.0)],
            ),
        )
        assert [p["name"] for p in merged["projects"] if p["id"] == "p1"] == ["New"]
        assert merged["workers"][0]["rate"] == 9.0

    def test_builtin_project_is_never_overwritten(self):
        renamed = get_builtin_project()
        renamed["name"] = "Hijacked"
        merged = merge_snapshot(
            _snapshot(projects=[get_builtin_project()]), _snapshot(projects=[renamed])
        )
        builtin = [p for p in merged["projects"] if p["id"] == BUILTIN_PROJECT_ID]
        assert [p["name"] for p in builtin] == ["Zarasai"]

    def test_builtin_project_is_always_present(self):
        merged = merge_snapshot(_snapshot(), _snapshot())
        assert [p["id"] for p in merged["projects"]] == [BUILTIN_PROJECT_ID]


class TestParsePayload:
    def test_camel_case_keys(self):
        payload = {
            "workers": [{"id": "w1", "name": "Jonas", "rate": 10, "cableRateMedium": 5}],
            "workEntries": [
                {
                    "id": "e1",
                    "type": "task",
                    "subType": "cables",
                    "projectId": "p1",
                    "workerIds": ["w1"],
                    "startTime": "2024-05-06T08:00:00.000Z",
                    "endTime": "2024-05-06T09:30:00.000Z",
                    "table": 7,
                    "tableSize": "medium",
                }
            ],
            "attendanceRecords": [
                {
                    "id": "p1_2024-05-06",
                    "projectId": "p1",
                    "date": "2024-05-06",
                    "presentWorkerIds": ["w1"],
                }
            ],
            "theme": "sunrise",
        }
        snapshot = parse_payload(payload)

        assert snapshot["workers"][0]["cable_rate_medium"] == 5.0
        entry = snapshot["work_entries"][0]
        assert entry["worker_ids"] == ["w1"]
        assert entry["table"] == "7"
        assert entry["duration"] == pytest.approx(1.5)
        assert snapshot["attendance_records"][0]["present_worker_ids"] == ["w1"]
        assert snapshot["theme"] == "sunrise"

    def test_snake_case(self):
        assert snake_case("cableRateSmall") == "cable_rate_small"
        assert snake_case("worker_ids") == "worker_ids"

    @pytest.mark.parametrize(
        "payload",
        [
            [],
            {"workers": "not a list"},
            {"workers": [{"name": "no id"}]},
            {"workEntries": [{"id": "e1", "type": "task", "subType": "welding",
                              "startTime": "2024-05-06T08:00:00Z",
                              "endTime": "2024-05-06T09:00:00Z"}]},
            {"workEntries": [{"id": "e2", "type": "task", "subType": "paneling",
                              "projectId": "p1", "workerIds": ["w1"],
                              "startTime": "2024-05-06T08:00:00Z",
                              "endTime": "2024-05-06T10:00:00Z"}]},
            {"workEntries": [{"id": "e3", "type": "task", "subType": "cables",
                              "projectId": "p1", "workerIds": ["w1"],
                              "startTime": "2024-05-06T08:00:00Z",
                              "endTime": "2024-05-06T10:00:00Z"}]},
            {"workEntries": [{"id": "e4", "type": "task", "subType": "paneling",
                              "projectId": "p1", "workerIds": ["w1"],
                              "startTime": "2024-05-06T08:00:00Z",
                              "endTime": "2024-05-06T10:00:00Z",
                              "moduleCount": "many"}]},
        ],
    )
    def test_malformed_payload(self, payload):
        with pytest.raises(ImportDataError):
            parse_payload(payload)

    def test_paneling_entry_gets_modules_per_hour(self):
        payload = {
            "workEntries": [
                {
                    "id": "e1",
                    "type": "task",
                    "subType": "paneling",
                    "projectId": "p1",
                    "workerIds": ["w1"],
                    "startTime": "2024-05-06T08:00:00Z",
                    "endTime": "2024-05-06T10:00:00Z",
                    "moduleCount": "40",
                }
            ]
        }
        entry = parse_payload(payload)["work_entries"][0]

        assert entry["module_count"] == 40
        assert entry["modules_per_hour"] == pytest.approx(20.0)


class TestImport:
    def test_import_persists_and_reloads(self, data_dir):
        WORKER_REPO.set_all_workers([make_worker("Local", id="w0")])
        payload = {
            "projects": [project_to_dict(make_project("Utena", id="p1"))],
            "workers": [worker_to_dict(make_worker("Jonas", id="w1", rate=10.0))],
            "workEntries": [work_entry_to_dict(make_hourly(["w1"], id="e1"))],
            "locale": "lt",
        }

        import_snapshot(payload)

        assert store.key_exists(configuration.WORKERS_KEY)
        assert {w["id"] for w in WORKER_REPO.get_all_workers()} == {"w0", "w1"}
        assert [e["id"] for e in WORK_ENTRY_REPO.get_all_work_entries()] == ["e1"]
        assert PROJECT_REPO.project_exists("p1")
        assert PROJECT_REPO.project_exists(BUILTIN_PROJECT_ID)
        assert SETTINGS_REPO.get_locale() == "lt"

    def test_failed_import_leaves_state_unchanged(self):
        WORKER_REPO.set_all_workers([make_worker("Local", id="w0")])
        with pytest.raises(ImportDataError):
            import_snapshot({"workers": [{"id": "w1"}]})
        assert [w["id"] for w in WORKER_REPO.get_all_workers()] == ["w0"]

    def test_failed_save_reports_partial_import(self, monkeypatch):
        def fail():
            raise OSError("disk full")

        monkeypatch.setattr("solarwork.service.merge.flush_all", fail)

        with pytest.raises(ImportDataError, match="partly saved"):
            import_snapshot({"workers": [worker_to_dict(make_worker("Jonas", id="w1"))]})

    def test_read_import_file_rejects_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ImportDataError):
            read_import_file(path)


class TestExport:
    def test_export_then_import_is_stable(self, tmp_path):
        WORKER_REPO.set_all_workers([make_worker("Jonas", id="w1", rate=10.0)])
        WORK_ENTRY_REPO.set_all_work_entries([make_hourly(["w1"], id="e1")])

        path = write_export(tmp_path)
        assert path.name == default_export_file_name()

        exported = json.loads(path.read_text())
        assert set(exported) >= {"workers", "workEntries"}

        import_snapshot(read_import_file(path))
        assert [w["id"] for w in WORKER_REPO.get_all_workers()] == ["w1"]
        assert [e["id"] for e in WORK_ENTRY_REPO.get_all_work_entries()] == ["e1"]

    def test_export_snapshot_only_holds_written_keys(self):
        # Loading seeds the built-in project
        PROJECT_REPO.get_all_projects()
        exported = export_snapshot()
        assert configuration.PROJECTS_KEY in exported
        assert configuration.WORK_ENTRIES_KEY not in exported

    def test_default_file_name(self):
        assert default_export_file_name().startswith("solar_work_count_backup_")
        assert default_export_file_name().endswith(".json")
