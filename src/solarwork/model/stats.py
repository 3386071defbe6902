# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from solarwork.model.entity_id import EntityId


class TimeBucket(TypedDict):
    hours: float
    earnings: float


class PanelingBucket(TypedDict):
    hours: float
    earnings: float
    panels: float


class TableCounts(TypedDict):
    small: float
    medium: float
    large: float
    total: float


class CablesBucket(TypedDict):
    hours: float
    earnings: float
    tables: TableCounts
    entries: int
    shared_entries: int
    tables_per_hour: float
    euros_per_table: float
    shared_tables_percent: float


class WorkerStats(TypedDict):
    id: EntityId
    name: str
    total_hours: float
    total_earnings: float
    avg_hourly_wage: float
    hourly: TimeBucket
    construction: TimeBucket
    paneling: PanelingBucket
    cables: CablesBucket


class ProjectTotals(TypedDict):
    entries: int
    total_hours: float
    total_earnings: float
    hours_by_type: dict[str, float]
    earnings_by_type: dict[str, float]
    panels: int
    tables: int


class RateGap(TypedDict):
    worker_id: EntityId
    worker_name: str
    work_type: str
    reason: str  # "rate_missing" | "size_missing"
    entry_id: Optional[EntityId]
