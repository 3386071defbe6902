# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from solarwork.model.attendance import AttendanceRecord
from solarwork.model.project import Project
from solarwork.model.worker import Worker
from solarwork.time import date_to_display_str
from solarwork.view.header import header


def attendance_report(
    project: Project,
    record: AttendanceRecord,
    workers: list[Worker],
    saved: bool,
) -> None:
    header("attendance", f"{project['name']} {date_to_display_str(record['date'])}")

    names_by_id = {worker["id"]: worker["name"] for worker in workers}
    attendance_table = Table(box=box.SIMPLE)
    attendance_table.add_column("id")
    attendance_table.add_column("worker")
    attendance_table.add_column("present")

    for worker_id in project["worker_ids"]:
        present = worker_id in record["present_worker_ids"]
        attendance_table.add_row(
            worker_id,
            names_by_id.get(worker_id, "unknown worker"),
            "[green]yes[/green]" if present else "[grey50]no[/grey50]",
        )

    console = Console()
    console.print(attendance_table)
    if not saved:
        console.print("[italic] not saved yet, everyone on the crew is present by default[/italic]")
