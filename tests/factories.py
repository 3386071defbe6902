"""Builders for domain records used across the test suite."""

from typing import Optional

import pendulum

from solarwork.model.entity_id import EntityId, generate_entity_id
from solarwork.model.project import Project
from solarwork.model.work_entry import (
    CablesWorkEntry,
    ConstructionWorkEntry,
    HourlyWorkEntry,
    PanelingWorkEntry,
)
from solarwork.model.worker import Worker

DAY = pendulum.date(2024, 5, 6)


def make_worker(
    name: str,
    id: Optional[EntityId] = None,
    rate: Optional[float] = None,
    panel_rate: Optional[float] = None,
    small: Optional[float] = None,
    medium: Optional[float] = None,
    large: Optional[float] = None,
) -> Worker:
    return {
        "id": id or generate_entity_id(),
        "name": name,
        "rate": rate,
        "panel_rate": panel_rate,
        "cable_rate_small": small,
        "cable_rate_medium": medium,
        "cable_rate_large": large,
    }


def make_project(
    name: str,
    id: Optional[EntityId] = None,
    tables: Optional[list[str]] = None,
    worker_ids: Optional[list[EntityId]] = None,
    status: str = "active",
) -> Project:
    return {
        "id": id or generate_entity_id(),
        "name": name,
        "status": status,
        "tables": tables or [],
        "worker_ids": worker_ids or [],
    }


def _common(
    worker_ids: list[EntityId],
    hours: float,
    day: pendulum.Date,
    start_hour: int,
    project_id: EntityId,
    id: Optional[EntityId],
) -> dict:
    start = pendulum.datetime(day.year, day.month, day.day, start_hour, tz="UTC")
    end = start.add(minutes=int(round(hours * 60)))
    return {
        "id": id or generate_entity_id(),
        "project_id": project_id,
        "worker_ids": list(worker_ids),
        "start_time": start,
        "end_time": end,
        "duration": hours,
        "date": day,
    }


def make_hourly(
    worker_ids: list[EntityId],
    hours: float = 2.0,
    day: pendulum.Date = DAY,
    start_hour: int = 8,
    project_id: EntityId = "p1",
    id: Optional[EntityId] = None,
    description: Optional[str] = None,
) -> HourlyWorkEntry:
    entry = _common(worker_ids, hours, day, start_hour, project_id, id)
    entry["type"] = "hourly"
    entry["description"] = description
    return entry  # type: ignore[return-value]


def make_paneling(
    worker_ids: list[EntityId],
    module_count: int,
    hours: float = 4.0,
    day: pendulum.Date = DAY,
    start_hour: int = 8,
    project_id: EntityId = "p1",
    id: Optional[EntityId] = None,
) -> PanelingWorkEntry:
    entry = _common(worker_ids, hours, day, start_hour, project_id, id)
    entry["type"] = "task"
    entry["sub_type"] = "paneling"
    entry["module_count"] = module_count
    entry["modules_per_hour"] = module_count / hours if hours else 0.0
    return entry  # type: ignore[return-value]


def make_construction(
    worker_ids: list[EntityId],
    hours: float = 3.0,
    description: str = "mounting rails",
    day: pendulum.Date = DAY,
    start_hour: int = 8,
    project_id: EntityId = "p1",
    id: Optional[EntityId] = None,
) -> ConstructionWorkEntry:
    entry = _common(worker_ids, hours, day, start_hour, project_id, id)
    entry["type"] = "task"
    entry["sub_type"] = "construction"
    entry["description"] = description
    return entry  # type: ignore[return-value]


def make_cables(
    worker_ids: list[EntityId],
    table: str,
    table_size: Optional[str] = "medium",
    hours: float = 1.0,
    day: pendulum.Date = DAY,
    start_hour: int = 8,
    project_id: EntityId = "p1",
    id: Optional[EntityId] = None,
) -> CablesWorkEntry:
    entry = _common(worker_ids, hours, day, start_hour, project_id, id)
    entry["type"] = "task"
    entry["sub_type"] = "cables"
    entry["table"] = table
    entry["table_size"] = table_size
    return entry  # type: ignore[return-value]
