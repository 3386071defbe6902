# SPDX-License-Identifier: MIT

from typing import Callable, Optional, cast

import pendulum

from solarwork.model.entity_id import EntityId
from solarwork.model.project import Project
from solarwork.model.work_entry import CablesWorkEntry, WorkEntry
from solarwork.model.work_type import WorkType
from solarwork.model.worker import Worker
from solarwork.service.rates import work_type_of

UNKNOWN_WORKER = "unknown worker"
UNKNOWN_PROJECT = "unknown project"


def _parse_float(value: str) -> Optional[float]:
    try:
        return float(value)
    except ValueError:
        return None


def parse_table_query(table_query: str) -> list[Callable[[str], bool]]:
    """
    Turn '1, 3-5, T7' into table predicates.

    A term with a dash is an inclusive numeric range, anything else an
    exact, case-insensitive table id. Ranges that do not parse are ignored.
    """
    conditions: list[Callable[[str], bool]] = []
    terms = [term.strip().lower() for term in table_query.split(",")]

    for term in terms:
        if not term:
            continue
        if "-" in term:
            start_str, _, end_str = term.partition("-")
            start = _parse_float(start_str)
            end = _parse_float(end_str)
            if start is None or end is None:
                continue

            def in_range(table: str, start: float = start, end: float = end) -> bool:
                table_number = _parse_float(table)
                return table_number is not None and start <= table_number <= end

            conditions.append(in_range)
        else:

            def matches(table: str, term: str = term) -> bool:
                return table.lower() == term

            conditions.append(matches)

    return conditions


def search_entries(
    entries: list[WorkEntry],
    worker_id: Optional[EntityId] = None,
    table_size: Optional[str] = None,
    table_query: Optional[str] = None,
    project_id: Optional[EntityId] = None,
) -> list[WorkEntry]:
    filtered = list(entries)

    if project_id is not None:
        filtered = [entry for entry in filtered if entry["project_id"] == project_id]

    if worker_id is not None:
        filtered = [entry for entry in filtered if worker_id in entry["worker_ids"]]

    if table_size is not None:
        filtered = [
            entry
            for entry in filtered
            if work_type_of(entry) == WorkType.CABLES
            and cast(CablesWorkEntry, entry)["table_size"] == table_size
        ]

    if table_query is not None and table_query.strip():
        conditions = parse_table_query(table_query)
        if conditions:
            filtered = [
                entry
                for entry in filtered
                if work_type_of(entry) == WorkType.CABLES
                and any(
                    condition(cast(CablesWorkEntry, entry)["table"])
                    for condition in conditions
                )
            ]

    return filtered


def group_by_date(
    entries: list[WorkEntry],
) -> list[tuple[pendulum.Date, list[WorkEntry]]]:
    """Entries grouped by date, newest date first."""
    ordered = sorted(entries, key=lambda entry: entry["start_time"], reverse=True)
    groups: dict[pendulum.Date, list[WorkEntry]] = {}
    for entry in ordered:
        groups.setdefault(entry["date"], []).append(entry)
    return sorted(groups.items(), key=lambda group: group[0], reverse=True)


def worker_names(worker_ids: list[EntityId], workers: list[Worker]) -> str:
    names_by_id = {worker["id"]: worker["name"] for worker in workers}
    return ", ".join(names_by_id.get(id, UNKNOWN_WORKER) for id in worker_ids)


def project_name(project_id: EntityId, projects: list[Project]) -> str:
    for project in projects:
        if project["id"] == project_id:
            return project["name"]
    return UNKNOWN_PROJECT


def entry_details(entry: WorkEntry) -> str:
    match work_type_of(entry):
        case WorkType.HOURLY:
            return entry.get("description") or ""  # type: ignore[return-value]
        case WorkType.CONSTRUCTION:
            return entry.get("description") or ""  # type: ignore[return-value]
        case WorkType.PANELING:
            return f"{entry.get('module_count')} modules"
        case WorkType.CABLES:
            return f"table {entry.get('table')} ({entry.get('table_size') or 'size missing'})"
    return ""


def daily_report(
    day: pendulum.Date,
    entries: list[WorkEntry],
    workers: list[Worker],
    projects: list[Project],
) -> Optional[str]:
    """Plain text report of a day's entries, None when nothing was logged."""
    day_entries = [entry for entry in entries if entry["date"] == day]
    if len(day_entries) == 0:
        return None

    lines = [f"Work report {day.isoformat()}:", ""]
    for entry in sorted(day_entries, key=lambda entry: entry["start_time"]):
        lines.append(
            f"Project: {project_name(entry['project_id'], projects)}, "
            f"Workers: {worker_names(entry['worker_ids'], workers)}, "
            f"Duration: {entry['duration']:.2f}h"
        )
    return "\n".join(lines) + "\n"
