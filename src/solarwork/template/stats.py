# SPDX-License-Identifier: MIT

from solarwork.model.stats import ProjectTotals, WorkerStats
from solarwork.model.work_type import WorkType
from solarwork.model.worker import Worker


def get_worker_stats_template(worker: Worker) -> WorkerStats:
    return {
        "id": worker["id"] or "",
        "name": worker["name"],
        "total_hours": 0.0,
        "total_earnings": 0.0,
        "avg_hourly_wage": 0.0,
        "hourly": {"hours": 0.0, "earnings": 0.0},
        "construction": {"hours": 0.0, "earnings": 0.0},
        "paneling": {"hours": 0.0, "earnings": 0.0, "panels": 0.0},
        "cables": {
            "hours": 0.0,
            "earnings": 0.0,
            "tables": {"small": 0.0, "medium": 0.0, "large": 0.0, "total": 0.0},
            "entries": 0,
            "shared_entries": 0,
            "tables_per_hour": 0.0,
            "euros_per_table": 0.0,
            "shared_tables_percent": 0.0,
        },
    }


def get_project_totals_template() -> ProjectTotals:
    return {
        "entries": 0,
        "total_hours": 0.0,
        "total_earnings": 0.0,
        "hours_by_type": {str(work_type): 0.0 for work_type in WorkType},
        "earnings_by_type": {str(work_type): 0.0 for work_type in WorkType},
        "panels": 0,
        "tables": 0,
    }
