# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from solarwork.model.stats_filter import StatsFilter
from solarwork.model.work_type import WorkType
from solarwork.repository.project import PROJECT_REPO
from solarwork.repository.work_entry import WORK_ENTRY_REPO
from solarwork.repository.worker import WORKER_REPO
from solarwork.service.aggregation import (
    aggregate,
    collect_rate_gaps,
    month_filter,
    summarize,
)
from solarwork.terminal.completion import (
    complete_project,
    complete_work_type,
    complete_worker,
)
from solarwork.terminal.parse import parse_date, parse_month, resolve_id, resolve_id_list
from solarwork.time import date_to_str
from solarwork.view import payroll as payroll_report


def payroll(
    month: Annotated[
        Optional[str],
        typer.Option(
            "--month",
            "-m",
            parser=parse_month,
            help="YYYY-MM, this or last",
        ),
    ] = None,
    start: Annotated[
        Optional[pendulum.Date],
        typer.Option("--from", "-f", parser=parse_date),
    ] = None,
    end: Annotated[
        Optional[pendulum.Date],
        typer.Option("--to", parser=parse_date),
    ] = None,
    project_id: Annotated[
        Optional[str],
        typer.Option("--project", "-p", autocompletion=complete_project),
    ] = None,
    worker_ids: Annotated[
        Optional[list[str]],
        typer.Option(
            "--worker",
            "-w",
            help="accepts multiple or comma separated worker ids",
            autocompletion=complete_worker,
        ),
    ] = None,
    work_types: Annotated[
        Optional[list[str]],
        typer.Option("--type", "-t", autocompletion=complete_work_type),
    ] = None,
    detailed: Annotated[
        bool, typer.Option("--detailed", "-d", help="per work type breakdown")
    ] = False,
) -> None:
    """
    earnings and performance per worker
    """
    if month is not None and (start is not None or end is not None):
        raise typer.BadParameter("Use either --month or --from/--to")

    stats_filter: StatsFilter = month_filter(month) if month is not None else {}
    if start is not None:
        stats_filter["start_date"] = start
    if end is not None:
        stats_filter["end_date"] = end

    context_parts: list[str] = []
    if project_id is not None:
        stats_filter["project_id"] = resolve_id(
            project_id,
            [p["id"] for p in PROJECT_REPO.get_all_projects() if p["id"] is not None],
            "project",
        )
        context_parts.append(
            PROJECT_REPO.get_project(stats_filter["project_id"])["name"]
        )
    if worker_ids:
        stats_filter["worker_ids"] = resolve_id_list(
            worker_ids,
            [w["id"] for w in WORKER_REPO.get_all_workers() if w["id"] is not None],
            "worker",
        )
    if work_types:
        valid_types = [t.value for t in WorkType]
        for work_type in work_types:
            if work_type not in valid_types:
                raise typer.BadParameter(
                    f"Unknown work type '{work_type}'. Valid types: {', '.join(valid_types)}"
                )
        stats_filter["work_types"] = [WorkType(t) for t in work_types]
        context_parts.append(", ".join(work_types))

    if "start_date" in stats_filter or "end_date" in stats_filter:
        start_str = (
            date_to_str(stats_filter["start_date"])
            if "start_date" in stats_filter
            else "..."
        )
        end_str = (
            date_to_str(stats_filter["end_date"]) if "end_date" in stats_filter else "..."
        )
        context_parts.insert(0, f"{start_str} to {end_str}")
    else:
        context_parts.insert(0, "all time")

    entries = WORK_ENTRY_REPO.get_all_work_entries()
    workers = WORKER_REPO.get_all_workers()

    payroll_report.payroll_report(
        aggregate(entries, workers, stats_filter),
        summarize(entries, workers, stats_filter),
        collect_rate_gaps(entries, workers, stats_filter),
        "payroll",
        " | ".join(context_parts),
        detailed,
    )
