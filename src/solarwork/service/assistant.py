# SPDX-License-Identifier: MIT

from typing import Any, Optional

import pendulum

from solarwork.model.project import Project
from solarwork.model.work_entry import WorkEntry
from solarwork.model.worker import Worker
from solarwork.service.aggregation import aggregate
from solarwork.service.forecast import project_progress
from solarwork.service.rates import work_type_of
from solarwork.service.records import entry_details, project_name, worker_names
from solarwork.time import today_local

RECENT_DAYS = 30


def build_assistant_context(
    projects: list[Project],
    workers: list[Worker],
    entries: list[WorkEntry],
    today: Optional[pendulum.Date] = None,
) -> dict[str, Any]:
    """
    Compact, JSON ready projection of the data for a conversational
    assistant: project progress, all-time worker totals and the entries of
    the last 30 days.
    """
    if today is None:
        today = today_local()

    project_stats = []
    for project in projects:
        progress = project_progress(project, entries)
        project_stats.append(
            {
                "name": project["name"],
                "status": project["status"],
                "total_tables": progress["total_tables"],
                "completed_tables": progress["completed_tables"],
                "progress": f"{progress['percent_complete']:.1f}%",
            }
        )

    stats_by_id = {
        stats["id"]: stats
        for stats in aggregate(
            entries,
            workers,
            {"worker_ids": [w["id"] for w in workers if w["id"] is not None]},
        )
    }
    worker_stats = []
    for worker in workers:
        stats = stats_by_id.get(worker["id"] or "")
        worker_stats.append(
            {
                "name": worker["name"],
                "hourly_rate": worker["rate"] or 0,
                "total_hours": round(stats["total_hours"], 1) if stats else 0.0,
                "total_earnings": round(stats["total_earnings"], 2) if stats else 0.0,
            }
        )

    since = today.subtract(days=RECENT_DAYS)
    recent_logs = [
        {
            "date": entry["date"].isoformat(),
            "project": project_name(entry["project_id"], projects),
            "workers": worker_names(entry["worker_ids"], workers),
            "type": str(work_type_of(entry)),
            "duration": f"{entry['duration']:.2f}h",
            "details": entry_details(entry),
        }
        for entry in entries
        if entry["date"] >= since
    ]

    return {
        "projects": project_stats,
        "workers": worker_stats,
        "recent_work": recent_logs,
    }
