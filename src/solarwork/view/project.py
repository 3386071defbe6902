# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from solarwork.model.forecast import Forecast, Progress
from solarwork.model.project import Project
from solarwork.model.worker import Worker
from solarwork.service.records import worker_names
from solarwork.template.project import BUILTIN_PROJECT_ID
from solarwork.view.header import header
from solarwork.view.util import format_number, format_percent

_STATUS_COLORS = {"active": "green", "paused": "yellow", "completed": "grey50"}


def projects_report(
    projects: list[Project], progress_by_id: dict[str, Progress], title: str = "projects"
) -> None:
    header(title)

    projects_table = Table(box=box.SIMPLE)
    for column in ["id", "name", "status", "tables", "done", "progress"]:
        projects_table.add_column(column)

    for project in projects:
        progress = progress_by_id[project["id"] or ""]
        color = _STATUS_COLORS.get(project["status"], "white")
        name = project["name"]
        if project["id"] == BUILTIN_PROJECT_ID:
            name = f"{name} [italic](built-in)[/italic]"
        projects_table.add_row(
            project["id"] or "",
            name,
            f"[{color}]{project['status']}[/{color}]",
            str(progress["total_tables"]),
            str(progress["completed_tables"]),
            format_percent(progress["percent_complete"]),
        )

    console = Console()
    console.print(projects_table)


def single_project_report(
    project: Project,
    workers: list[Worker],
    progress: Progress,
    forecast: Forecast,
    has_plan: bool,
) -> None:
    header("project", project["name"])

    project_table = Table(box=box.SIMPLE)
    project_table.add_column("property")
    project_table.add_column("value")

    project_table.add_row("id", project["id"] or "")
    project_table.add_row("name", project["name"])
    project_table.add_row("status", project["status"])
    project_table.add_row("crew", worker_names(project["worker_ids"], workers))
    project_table.add_row("site plan", "yes" if has_plan else "no")
    project_table.add_row(
        "tables",
        f"{progress['completed_tables']}/{progress['total_tables']} "
        f"({format_percent(progress['percent_complete'])})",
    )
    project_table.add_row("remaining", ", ".join(progress["remaining_tables"]))
    project_table.add_row("days worked", str(forecast["unique_days_worked"]))
    project_table.add_row("tables per day", format_number(forecast["tables_per_day"]))

    if forecast["has_forecast"] and forecast["completion_date"] is not None:
        project_table.add_row("remaining days", str(forecast["remaining_days"]))
        project_table.add_row(
            "completion", forecast["completion_date"].format("YYYY-MM-DD ddd")
        )
    else:
        project_table.add_row("completion", "[italic]no forecast yet[/italic]")

    console = Console()
    console.print(project_table)
