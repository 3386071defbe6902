# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from solarwork.model.project import Project
from solarwork.model.work_entry import WorkEntry
from solarwork.model.worker import Worker
from solarwork.service.rates import work_type_of
from solarwork.service.records import entry_details, project_name, worker_names
from solarwork.time import (
    date_to_display_str,
    datetime_to_display_local_time_str,
    hours_to_str,
)
from solarwork.view.header import header

_TYPE_COLORS = {
    "hourly": "deep_sky_blue1",
    "paneling": "gold1",
    "construction": "orange3",
    "cables": "medium_purple1",
}


def _entries_table(
    entries: list[WorkEntry], workers: list[Worker], projects: list[Project]
) -> Table:
    entries_table = Table(box=box.SIMPLE)
    for column in ["id", "type", "project", "workers", "time", "duration", "details"]:
        entries_table.add_column(column)

    for entry in entries:
        work_type = str(work_type_of(entry))
        color = _TYPE_COLORS.get(work_type, "white")
        details = entry_details(entry)
        if "size missing" in details:
            details = f"[red]{details}[/red]"
        entries_table.add_row(
            entry["id"] or "",
            f"[{color}]{work_type}[/{color}]",
            project_name(entry["project_id"], projects),
            worker_names(entry["worker_ids"], workers),
            f"{datetime_to_display_local_time_str(entry['start_time'])}-"
            f"{datetime_to_display_local_time_str(entry['end_time'])}",
            hours_to_str(entry["duration"]),
            details,
        )
    return entries_table


def work_entries_report(
    groups: list[tuple[pendulum.Date, list[WorkEntry]]],
    workers: list[Worker],
    projects: list[Project],
    title: str = "work entries",
) -> None:
    header(title)

    console = Console()
    if len(groups) == 0:
        console.print("[italic] no entries[/italic]")
        return

    for day, entries in groups:
        total = sum(entry["duration"] for entry in entries)
        console.print(
            f"\n [bold]{date_to_display_str(day)}[/bold]  "
            f"[grey50]{len(entries)} entries, {hours_to_str(total)}h[/grey50]"
        )
        console.print(_entries_table(entries, workers, projects))


def single_work_entry_report(
    entry: WorkEntry,
    workers: list[Worker],
    projects: list[Project],
    title: str = "work entry",
) -> None:
    header(title)

    console = Console()
    console.print(_entries_table([entry], workers, projects))
