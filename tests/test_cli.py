"""Smoke tests for the command line interface."""

import pytest
from typer.testing import CliRunner

from solarwork.repository.attendance import ATTENDANCE_REPO
from solarwork.repository.blob import BLOB_REPO
from solarwork.repository.project import PROJECT_REPO
from solarwork.repository.work_entry import WORK_ENTRY_REPO
from solarwork.repository.worker import WORKER_REPO
from solarwork.template.project import BUILTIN_PROJECT_ID
from solarwork.terminal.app import app

runner = CliRunner()


def _invoke(*args: str):
    return runner.invoke(app, list(args))


@pytest.fixture
def worker_id() -> str:
    result = _invoke("worker", "add", "Jonas", "--rate", "10", "--medium", "5")
    assert result.exit_code == 0, result.output
    return WORKER_REPO.get_all_workers()[0]["id"]


@pytest.fixture
def project_id() -> str:
    result = _invoke("project", "add", "Utena", "--tables", "1,2,3,4")
    assert result.exit_code == 0, result.output
    return [p for p in PROJECT_REPO.get_all_projects() if p["name"] == "Utena"][0]["id"]


class TestWorker:
    def test_add_and_list(self, worker_id):
        worker = WORKER_REPO.find_worker(worker_id)
        assert worker is not None
        assert worker["rate"] == 10.0
        assert worker["cable_rate_medium"] == 5.0

        result = _invoke("w", "ls")
        assert result.exit_code == 0
        assert "Jonas" in result.output

    def test_modify(self, worker_id):
        result = _invoke("worker", "modify", worker_id[:8], "--panel-rate", "0.5")
        assert result.exit_code == 0, result.output
        assert WORKER_REPO.find_worker(worker_id)["panel_rate"] == 0.5

    def test_delete(self, worker_id):
        result = _invoke("worker", "delete", worker_id, "--yes")
        assert result.exit_code == 0, result.output
        assert WORKER_REPO.get_all_workers() == []


class TestProject:
    def test_add(self, project_id):
        assert PROJECT_REPO.get_project(project_id)["tables"] == ["1", "2", "3", "4"]

    def test_show(self, project_id):
        result = _invoke("p", "show", project_id)
        assert result.exit_code == 0, result.output
        assert "Utena" in result.output

    def test_assign(self, project_id, worker_id):
        result = _invoke("project", "assign", project_id, "--worker", worker_id)
        assert result.exit_code == 0, result.output
        assert PROJECT_REPO.get_project(project_id)["worker_ids"] == [worker_id]

    def test_builtin_project_cannot_be_deleted(self):
        result = _invoke("project", "delete", BUILTIN_PROJECT_ID, "--yes")
        assert result.exit_code == 1
        assert PROJECT_REPO.project_exists(BUILTIN_PROJECT_ID)

    def test_unknown_project(self):
        result = _invoke("project", "show", "does-not-exist")
        assert result.exit_code != 0

    def test_plan(self, project_id, tmp_path):
        plan = tmp_path / "plan.pdf"
        plan.write_bytes(b"%PDF-1.4")

        result = _invoke("project", "plan", "put", project_id, str(plan))
        assert result.exit_code == 0, result.output
        assert BLOB_REPO.get(project_id) == b"%PDF-1.4"

        copy = tmp_path / "copy.pdf"
        result = _invoke("project", "plan", "get", project_id, str(copy))
        assert result.exit_code == 0, result.output
        assert copy.read_bytes() == b"%PDF-1.4"


class TestWork:
    def test_hourly_and_payroll(self, worker_id):
        result = _invoke(
            "work",
            "hourly",
            "--worker",
            worker_id,
            "--start",
            "2024-05-06 08:00",
            "--end",
            "2024-05-06 10:00",
        )
        assert result.exit_code == 0, result.output

        entries = WORK_ENTRY_REPO.get_all_work_entries()
        assert len(entries) == 1
        assert entries[0]["project_id"] == BUILTIN_PROJECT_ID
        assert entries[0]["duration"] == pytest.approx(2.0)

        result = _invoke("payroll", "--month", "2024-05")
        assert result.exit_code == 0, result.output
        assert "Jonas" in result.output
        assert "20.00" in result.output

    def test_end_before_start_is_rejected(self, worker_id):
        result = _invoke(
            "wk",
            "hourly",
            "-w",
            worker_id,
            "-s",
            "2024-05-06 10:00",
            "-e",
            "2024-05-06 08:00",
        )
        assert result.exit_code == 1
        assert WORK_ENTRY_REPO.get_all_work_entries() == []

    def test_cables_one_entry_per_table(self, worker_id, project_id):
        result = _invoke(
            "work",
            "cables",
            "-w",
            worker_id,
            "-p",
            project_id,
            "-s",
            "2024-05-06 08:00",
            "-e",
            "2024-05-06 12:00",
            "--tables",
            "1:small,2",
            "--size",
            "medium",
        )
        assert result.exit_code == 0, result.output

        entries = WORK_ENTRY_REPO.get_all_work_entries()
        sizes = {entry["table"]: entry["table_size"] for entry in entries}
        assert sizes == {"1": "small", "2": "medium"}

        again = _invoke(
            "work",
            "cables",
            "-w",
            worker_id,
            "-p",
            project_id,
            "-s",
            "2024-05-07 08:00",
            "-e",
            "2024-05-07 09:00",
            "--tables",
            "2:large",
        )
        assert again.exit_code == 1
        assert len(WORK_ENTRY_REPO.get_all_work_entries()) == 2

    def test_delete(self, worker_id):
        _invoke(
            "work",
            "hourly",
            "-w",
            worker_id,
            "-s",
            "2024-05-06 08:00",
            "-e",
            "2024-05-06 09:00",
        )
        entry_id = WORK_ENTRY_REPO.get_all_work_entries()[0]["id"]

        result = _invoke("work", "delete", entry_id)
        assert result.exit_code == 0, result.output
        assert WORK_ENTRY_REPO.get_all_work_entries() == []


class TestAttendance:
    def test_save(self, project_id, worker_id):
        _invoke("project", "assign", project_id, "-w", worker_id)
        result = _invoke(
            "at", "save", project_id, "--present", worker_id, "--date", "2024-05-06"
        )
        assert result.exit_code == 0, result.output

        record = ATTENDANCE_REPO.find_record(f"{project_id}_2024-05-06")
        assert record is not None
        assert record["present_worker_ids"] == [worker_id]

    def test_worker_must_be_on_roster(self, project_id, worker_id):
        result = _invoke("attendance", "save", project_id, "--present", worker_id)
        assert result.exit_code == 1


class TestData:
    def test_export_and_report(self, worker_id, tmp_path):
        _invoke(
            "work",
            "hourly",
            "-w",
            worker_id,
            "-s",
            "2024-05-06 08:00",
            "-e",
            "2024-05-06 09:30",
        )

        result = _invoke("data", "export", str(tmp_path))
        assert result.exit_code == 0, result.output
        assert len(list(tmp_path.glob("solar_work_count_backup_*.json"))) == 1

        result = _invoke("data", "report", "--date", "2024-05-06")
        assert result.exit_code == 0, result.output
        assert "Work report 2024-05-06:" in result.output
        assert "Duration: 1.50h" in result.output

    def test_import_rejects_broken_file(self, tmp_path):
        broken = tmp_path / "broken.json"
        broken.write_text("[1, 2")
        result = _invoke("data", "import", str(broken))
        assert result.exit_code == 1

    def test_context_is_json(self, worker_id):
        result = _invoke("data", "context", "--raw")
        assert result.exit_code == 0, result.output
        assert '"recent_work"' in result.output
