# SPDX-License-Identifier: MIT

import math
from typing import Optional, cast

import pendulum

from solarwork.model.forecast import Forecast, Progress
from solarwork.model.project import Project
from solarwork.model.work_entry import CablesWorkEntry, WorkEntry
from solarwork.model.work_type import WorkType
from solarwork.service.rates import work_type_of
from solarwork.time import today_local


def cable_entries_of(entries: list[WorkEntry]) -> list[CablesWorkEntry]:
    return [
        cast(CablesWorkEntry, entry)
        for entry in entries
        if work_type_of(entry) == WorkType.CABLES
    ]


def completed_tables(entries: list[WorkEntry]) -> list[str]:
    """
    Tables logged at least once, in the order they were first logged.

    A table is done the first time it is logged; logging it again changes
    nothing.
    """
    chronological = sorted(cable_entries_of(entries), key=lambda e: e["start_time"])
    return list(dict.fromkeys(entry["table"] for entry in chronological))


def forecast_completion(
    tables: list[str],
    entries: list[WorkEntry],
    today: Optional[pendulum.Date] = None,
) -> Forecast:
    """
    Project a completion date from the cable-table velocity.

    Velocity is completed tables per distinct day with cable work. With
    nothing left to do the forecast is today; with work left but no
    velocity there is no forecast (remaining_days and completion_date are
    None).
    """
    if today is None:
        today = today_local()

    cable_entries = cable_entries_of(entries)
    universe = set(tables)
    completed = [table for table in completed_tables(entries) if table in universe]
    unique_days_worked = len({entry["date"] for entry in cable_entries})

    tables_per_day = 0.0
    if unique_days_worked > 0:
        tables_per_day = len(completed) / unique_days_worked

    remaining_tables = max(len(universe) - len(completed), 0)

    remaining_days: Optional[int]
    completion_date: Optional[pendulum.Date]
    if remaining_tables == 0:
        remaining_days = 0
        completion_date = today
    elif tables_per_day == 0:
        remaining_days = None
        completion_date = None
    else:
        remaining_days = math.ceil(remaining_tables / tables_per_day)
        completion_date = today.add(days=remaining_days)

    return {
        "total_tables": len(universe),
        "completed_tables": len(completed),
        "unique_days_worked": unique_days_worked,
        "tables_per_day": tables_per_day,
        "remaining_days": remaining_days,
        "completion_date": completion_date,
        "has_forecast": remaining_days is not None,
    }


def project_progress(project: Project, entries: list[WorkEntry]) -> Progress:
    project_entries = [e for e in entries if e["project_id"] == project["id"]]
    done = set(completed_tables(project_entries))
    completed = [table for table in project["tables"] if table in done]
    remaining = [table for table in project["tables"] if table not in done]

    percent_complete = 0.0
    if len(project["tables"]) > 0:
        percent_complete = len(completed) / len(project["tables"]) * 100

    return {
        "total_tables": len(project["tables"]),
        "completed_tables": len(completed),
        "remaining_tables": remaining,
        "percent_complete": percent_complete,
    }
