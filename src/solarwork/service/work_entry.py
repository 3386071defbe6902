# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional, cast

import pendulum

from solarwork.errors import WorkEntryValidationError
from solarwork.model.entity_id import EntityId
from solarwork.model.project import Project
from solarwork.model.work_entry import (
    BaseWorkEntry,
    CablesWorkEntry,
    ConstructionWorkEntry,
    HourlyWorkEntry,
    PanelingWorkEntry,
    WorkEntry,
)
from solarwork.model.work_type import TableSize, WorkType
from solarwork.model.worker import Worker
from solarwork.service.forecast import completed_tables
from solarwork.service.rates import work_type_of
from solarwork.template.work_entry import (
    get_cables_entry_template,
    get_construction_entry_template,
    get_hourly_entry_template,
    get_paneling_entry_template,
)
from solarwork.time import datetime_to_local_date, hours_between

logger = logging.getLogger(__name__)

MAX_WORKERS_PER_ENTRY = 2


def validate_time_range(
    start_time: Optional[pendulum.DateTime], end_time: Optional[pendulum.DateTime]
) -> float:
    """Return the duration in hours, or raise if the range is unusable."""
    if start_time is None or end_time is None:
        raise WorkEntryValidationError("Start and end time are required.")
    if end_time <= start_time:
        raise WorkEntryValidationError("End time must be after start time.")
    return hours_between(start_time, end_time)


def validate_worker_ids(
    worker_ids: list[EntityId],
    workers: list[Worker],
    max_workers: int = MAX_WORKERS_PER_ENTRY,
) -> list[EntityId]:
    if len(worker_ids) == 0:
        raise WorkEntryValidationError("At least one worker is required.")
    if len(set(worker_ids)) != len(worker_ids):
        raise WorkEntryValidationError("A worker can only be listed once per entry.")
    if len(worker_ids) > max_workers:
        raise WorkEntryValidationError(
            f"An entry can have at most {max_workers} workers. Got: {len(worker_ids)}"
        )
    known_ids = {worker["id"] for worker in workers}
    unknown = [id for id in worker_ids if id not in known_ids]
    if unknown:
        raise WorkEntryValidationError(f"Unknown worker: {', '.join(unknown)}")
    return list(worker_ids)


def validate_table_size(table_size: Optional[str]) -> str:
    if table_size is None:
        raise WorkEntryValidationError("Table size is required.")
    try:
        return TableSize(table_size).value
    except ValueError:
        raise WorkEntryValidationError(
            f"Unknown table size '{table_size}'. "
            f"Valid sizes: {', '.join(size.value for size in TableSize)}"
        )


def _fill_common(
    entry: BaseWorkEntry,
    project: Project,
    worker_ids: list[EntityId],
    start_time: pendulum.DateTime,
    end_time: pendulum.DateTime,
    duration: float,
) -> None:
    if project["id"] is None:
        raise ValueError("Project must have an ID")
    entry["project_id"] = project["id"]
    entry["worker_ids"] = list(worker_ids)
    entry["start_time"] = start_time
    entry["end_time"] = end_time
    entry["duration"] = duration
    entry["date"] = datetime_to_local_date(start_time)


def create_hourly_entry(
    project: Project,
    workers: list[Worker],
    worker_ids: list[EntityId],
    start_time: Optional[pendulum.DateTime],
    end_time: Optional[pendulum.DateTime],
    description: Optional[str] = None,
    max_workers: int = MAX_WORKERS_PER_ENTRY,
) -> HourlyWorkEntry:
    duration = validate_time_range(start_time, end_time)
    worker_ids = validate_worker_ids(worker_ids, workers, max_workers)

    entry = get_hourly_entry_template()
    _fill_common(entry, project, worker_ids, start_time, end_time, duration)  # type: ignore[arg-type]
    entry["description"] = description or None
    return entry


def create_paneling_entry(
    project: Project,
    workers: list[Worker],
    worker_ids: list[EntityId],
    start_time: Optional[pendulum.DateTime],
    end_time: Optional[pendulum.DateTime],
    module_count: Optional[int],
    max_workers: int = MAX_WORKERS_PER_ENTRY,
) -> PanelingWorkEntry:
    duration = validate_time_range(start_time, end_time)
    worker_ids = validate_worker_ids(worker_ids, workers, max_workers)
    if module_count is None or module_count < 1:
        raise WorkEntryValidationError(
            f"Module count must be a positive integer. Got: {module_count}"
        )

    entry = get_paneling_entry_template()
    _fill_common(entry, project, worker_ids, start_time, end_time, duration)  # type: ignore[arg-type]
    entry["module_count"] = module_count
    entry["modules_per_hour"] = module_count / duration
    return entry


def create_construction_entry(
    project: Project,
    workers: list[Worker],
    worker_ids: list[EntityId],
    start_time: Optional[pendulum.DateTime],
    end_time: Optional[pendulum.DateTime],
    description: Optional[str],
    max_workers: int = MAX_WORKERS_PER_ENTRY,
) -> ConstructionWorkEntry:
    duration = validate_time_range(start_time, end_time)
    worker_ids = validate_worker_ids(worker_ids, workers, max_workers)
    if description is None or description.strip() == "":
        raise WorkEntryValidationError("Construction work requires a description.")

    entry = get_construction_entry_template()
    _fill_common(entry, project, worker_ids, start_time, end_time, duration)  # type: ignore[arg-type]
    entry["description"] = description.strip()
    return entry


def create_cables_entries(
    project: Project,
    workers: list[Worker],
    worker_ids: list[EntityId],
    start_time: Optional[pendulum.DateTime],
    end_time: Optional[pendulum.DateTime],
    table_sizes: dict[str, str],
    existing_entries: list[WorkEntry],
    max_workers: int = MAX_WORKERS_PER_ENTRY,
) -> list[CablesWorkEntry]:
    """
    One cable entry per table, all sharing workers and times.

    Tables must belong to the project and must not be completed yet.
    """
    if len(table_sizes) == 0:
        raise WorkEntryValidationError("Select at least one table.")
    duration = validate_time_range(start_time, end_time)
    worker_ids = validate_worker_ids(worker_ids, workers, max_workers)

    project_entries = [e for e in existing_entries if e["project_id"] == project["id"]]
    done = set(completed_tables(project_entries))

    entries: list[CablesWorkEntry] = []
    for table, table_size in table_sizes.items():
        if table not in project["tables"]:
            raise WorkEntryValidationError(
                f"Table '{table}' is not part of project '{project['name']}'."
            )
        if table in done:
            raise WorkEntryValidationError(f"Table '{table}' is already completed.")

        entry = get_cables_entry_template()
        _fill_common(entry, project, worker_ids, start_time, end_time, duration)  # type: ignore[arg-type]
        entry["table"] = table
        entry["table_size"] = validate_table_size(table_size)
        entries.append(entry)

    return entries


def update_work_entry(
    entry: WorkEntry,
    workers: list[Worker],
    worker_ids: Optional[list[EntityId]] = None,
    start_time: Optional[pendulum.DateTime] = None,
    end_time: Optional[pendulum.DateTime] = None,
    description: Optional[str] = None,
    module_count: Optional[int] = None,
    table_size: Optional[str] = None,
    max_workers: int = MAX_WORKERS_PER_ENTRY,
) -> WorkEntry:
    """
    Return a modified copy of the entry with derived fields recomputed.

    The table of a cable entry is fixed; only its size can change.
    """
    updated = deepcopy(entry)
    work_type = work_type_of(updated)

    new_start = start_time if start_time is not None else updated["start_time"]
    new_end = end_time if end_time is not None else updated["end_time"]
    updated["duration"] = validate_time_range(new_start, new_end)
    updated["start_time"] = new_start
    updated["end_time"] = new_end
    updated["date"] = datetime_to_local_date(new_start)

    if worker_ids is not None:
        updated["worker_ids"] = validate_worker_ids(worker_ids, workers, max_workers)

    if description is not None:
        match work_type:
            case WorkType.HOURLY:
                cast(HourlyWorkEntry, updated)["description"] = description or None
            case WorkType.CONSTRUCTION:
                if description.strip() == "":
                    raise WorkEntryValidationError(
                        "Construction work requires a description."
                    )
                cast(ConstructionWorkEntry, updated)["description"] = description.strip()
            case _:
                raise WorkEntryValidationError(
                    f"{work_type} entries have no description."
                )

    if module_count is not None:
        if work_type != WorkType.PANELING:
            raise WorkEntryValidationError(f"{work_type} entries have no module count.")
        if module_count < 1:
            raise WorkEntryValidationError(
                f"Module count must be a positive integer. Got: {module_count}"
            )
        cast(PanelingWorkEntry, updated)["module_count"] = module_count

    if table_size is not None:
        if work_type != WorkType.CABLES:
            raise WorkEntryValidationError(f"{work_type} entries have no table size.")
        cast(CablesWorkEntry, updated)["table_size"] = validate_table_size(table_size)

    if work_type == WorkType.PANELING:
        paneling = cast(PanelingWorkEntry, updated)
        paneling["modules_per_hour"] = paneling["module_count"] / updated["duration"]

    return updated


def remove_worker_from_entries(
    entries: list[WorkEntry], worker_id: EntityId
) -> tuple[list[WorkEntry], int]:
    """
    Drop a worker from every entry.

    Entries left without workers are removed. Returns the new list and the
    number of removed entries.
    """
    result: list[WorkEntry] = []
    removed = 0
    for entry in entries:
        if worker_id in entry["worker_ids"]:
            entry = deepcopy(entry)
            entry["worker_ids"] = [id for id in entry["worker_ids"] if id != worker_id]
            if len(entry["worker_ids"]) == 0:
                removed += 1
                continue
        result.append(entry)
    return result, removed
