import pytest

from factories import make_cables, make_worker
from solarwork.errors import BlobStoreError, ProjectValidationError
from solarwork.repository.attendance import ATTENDANCE_REPO
from solarwork.repository.blob import BLOB_REPO
from solarwork.repository.project import PROJECT_REPO
from solarwork.repository.work_entry import WORK_ENTRY_REPO
from solarwork.repository.worker import WORKER_REPO
from solarwork.service.project import (
    assign_workers,
    create_project,
    delete_project,
    parse_tables,
    unassign_workers,
)
from solarwork.template.project import BUILTIN_PROJECT_ID


class TestParseTables:
    def test_comma_and_newline_separated(self):
        assert parse_tables("1, 2,3\n4\n\n 5 ") == ["1", "2", "3", "4", "5"]

    def test_duplicates_and_blanks_dropped(self):
        assert parse_tables("A1,,A1, A2,") == ["A1", "A2"]

    def test_none(self):
        assert parse_tables(None) == []


class TestCreateProject:
    def test_defaults(self):
        project = create_project("Utena", tables=["1", "2"])
        assert project["status"] == "active"
        assert project["tables"] == ["1", "2"]

    def test_name_required(self):
        with pytest.raises(ProjectValidationError):
            create_project("  ")

    def test_unknown_status(self):
        with pytest.raises(ProjectValidationError, match="Unknown project status"):
            create_project("Utena", status="archived")


def test_builtin_project_is_seeded():
    projects = PROJECT_REPO.get_all_projects()
    assert [p["id"] for p in projects] == [BUILTIN_PROJECT_ID]
    assert projects[0]["name"] == "Zarasai"


def test_save_new_project_deduplicates_tables():
    id = PROJECT_REPO.save_new_project(create_project("Utena", tables=["1", "1", "2"]))
    assert PROJECT_REPO.get_project(id)["tables"] == ["1", "2"]


class TestRoster:
    def test_assign_and_unassign(self):
        WORKER_REPO.set_all_workers([make_worker("A", id="a"), make_worker("B", id="b")])
        id = PROJECT_REPO.save_new_project(create_project("Utena"))

        assign_workers(id, ["a", "b", "a"])
        assert PROJECT_REPO.get_project(id)["worker_ids"] == ["a", "b"]

        unassign_workers(id, ["a"])
        assert PROJECT_REPO.get_project(id)["worker_ids"] == ["b"]

    def test_assign_unknown_worker(self):
        id = PROJECT_REPO.save_new_project(create_project("Utena"))
        with pytest.raises(ProjectValidationError):
            assign_workers(id, ["ghost"])


class TestDeleteProject:
    def test_builtin_project_cannot_be_deleted(self):
        with pytest.raises(ProjectValidationError):
            delete_project(BUILTIN_PROJECT_ID)

    def test_cascade(self):
        id = PROJECT_REPO.save_new_project(create_project("Utena", tables=["1"]))
        WORK_ENTRY_REPO.set_all_work_entries(
            [
                make_cables(["a"], "1", project_id=id),
                make_cables(["a"], "1", project_id=BUILTIN_PROJECT_ID),
            ]
        )
        BLOB_REPO.put(id, b"%PDF")

        delete_project(id)

        assert PROJECT_REPO.find_project(id) is None
        assert [e["project_id"] for e in WORK_ENTRY_REPO.get_all_work_entries()] == [
            BUILTIN_PROJECT_ID
        ]
        assert ATTENDANCE_REPO.get_all_records() == []
        assert BLOB_REPO.get(id) is None

    def test_failed_plan_delete_keeps_project(self, monkeypatch):
        id = PROJECT_REPO.save_new_project(create_project("Utena", tables=["1"]))
        WORK_ENTRY_REPO.set_all_work_entries([make_cables(["a"], "1", project_id=id)])

        def fail(project_id):
            raise BlobStoreError("Could not delete plan: disk gone")

        monkeypatch.setattr(BLOB_REPO, "delete", fail)

        with pytest.raises(BlobStoreError):
            delete_project(id)

        assert PROJECT_REPO.find_project(id) is not None
        assert [e["project_id"] for e in WORK_ENTRY_REPO.get_all_work_entries()] == [id]
