# SPDX-License-Identifier: MIT

import logging
from typing import Optional, cast

from solarwork.model.entity_id import EntityId
from solarwork.model.stats import RateGap, ProjectTotals, WorkerStats
from solarwork.model.stats_filter import StatsFilter
from solarwork.model.work_entry import CablesWorkEntry, PanelingWorkEntry, WorkEntry
from solarwork.model.work_type import TableSize, WorkType
from solarwork.model.worker import Worker
from solarwork.service.rates import find_rate_gaps, resolve_rate, work_type_of
from solarwork.template.stats import (
    get_project_totals_template,
    get_worker_stats_template,
)
from solarwork.time import month_boundaries

logger = logging.getLogger(__name__)


def safe_divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


def month_filter(month: str, **dimensions: object) -> StatsFilter:
    """Date range filter for a 'YYYY-MM' month plus any other dimensions."""
    start_date, end_date = month_boundaries(month)
    stats_filter = cast(StatsFilter, dict(dimensions))
    stats_filter["start_date"] = start_date
    stats_filter["end_date"] = end_date
    return stats_filter


def entry_matches(entry: WorkEntry, stats_filter: Optional[StatsFilter]) -> bool:
    if not stats_filter:
        return True

    project_id = stats_filter.get("project_id")
    if project_id is not None and entry["project_id"] != project_id:
        return False

    start_date = stats_filter.get("start_date")
    if start_date is not None and entry["date"] < start_date:
        return False

    end_date = stats_filter.get("end_date")
    if end_date is not None and entry["date"] > end_date:
        return False

    worker_ids = stats_filter.get("worker_ids")
    if worker_ids and not any(id in worker_ids for id in entry["worker_ids"]):
        return False

    work_types = stats_filter.get("work_types")
    if work_types and work_type_of(entry) not in work_types:
        return False

    return True


def filter_entries(
    entries: list[WorkEntry], stats_filter: Optional[StatsFilter]
) -> list[WorkEntry]:
    return [entry for entry in entries if entry_matches(entry, stats_filter)]


def _earnings_share(entry: WorkEntry, worker: Worker, worker_count: int) -> float:
    rate = resolve_rate(entry, worker)
    match work_type_of(entry):
        case WorkType.HOURLY | WorkType.CONSTRUCTION:
            return entry["duration"] * rate / worker_count
        case WorkType.PANELING:
            module_count = cast(PanelingWorkEntry, entry)["module_count"] or 0
            return module_count * rate / worker_count
        case WorkType.CABLES:
            # Paid per table per crew, not per hour
            return rate / worker_count
    return 0.0


def _accumulate(
    stats: WorkerStats,
    entry: WorkEntry,
    duration_share: float,
    earnings_share: float,
    worker_count: int,
) -> None:
    stats["total_hours"] += duration_share
    stats["total_earnings"] += earnings_share

    match work_type_of(entry):
        case WorkType.HOURLY:
            stats["hourly"]["hours"] += duration_share
            stats["hourly"]["earnings"] += earnings_share
        case WorkType.CONSTRUCTION:
            stats["construction"]["hours"] += duration_share
            stats["construction"]["earnings"] += earnings_share
        case WorkType.PANELING:
            module_count = cast(PanelingWorkEntry, entry)["module_count"] or 0
            stats["paneling"]["hours"] += duration_share
            stats["paneling"]["earnings"] += earnings_share
            stats["paneling"]["panels"] += module_count / worker_count
        case WorkType.CABLES:
            cables = stats["cables"]
            cables["hours"] += duration_share
            cables["earnings"] += earnings_share
            cables["entries"] += 1
            if worker_count > 1:
                cables["shared_entries"] += 1
            table_size = cast(CablesWorkEntry, entry).get("table_size")
            if table_size in (size.value for size in TableSize):
                cables["tables"][table_size] += 1 / worker_count  # type: ignore[literal-required]
            cables["tables"]["total"] += 1 / worker_count


def _finalize(stats: WorkerStats) -> None:
    stats["avg_hourly_wage"] = safe_divide(stats["total_earnings"], stats["total_hours"])

    cables = stats["cables"]
    cables["tables_per_hour"] = safe_divide(cables["tables"]["total"], cables["hours"])
    cables["euros_per_table"] = safe_divide(
        cables["earnings"], cables["tables"]["total"]
    )
    cables["shared_tables_percent"] = (
        safe_divide(cables["shared_entries"], cables["entries"]) * 100
    )


def aggregate(
    entries: list[WorkEntry],
    workers: list[Worker],
    stats_filter: Optional[StatsFilter] = None,
) -> list[WorkerStats]:
    """
    Fold work entries into per-worker statistics.

    Every amount of an entry is split evenly across its workers. Workers
    without earnings are left out, unless the filter names workers: then
    exactly the named workers are returned. Sorted by earnings, highest
    first, ties in roster order.
    """
    stats_by_worker: dict[EntityId, WorkerStats] = {}
    workers_by_id: dict[EntityId, Worker] = {}
    for worker in workers:
        if worker["id"] is None:
            continue
        stats_by_worker[worker["id"]] = get_worker_stats_template(worker)
        workers_by_id[worker["id"]] = worker

    for entry in filter_entries(entries, stats_filter):
        worker_count = len(entry["worker_ids"])
        if worker_count == 0:
            continue

        duration_share = entry["duration"] / worker_count
        for worker_id in entry["worker_ids"]:
            worker = workers_by_id.get(worker_id)
            if worker is None:
                continue
            earnings_share = _earnings_share(entry, worker, worker_count)
            _accumulate(
                stats_by_worker[worker_id],
                entry,
                duration_share,
                earnings_share,
                worker_count,
            )

    for stats in stats_by_worker.values():
        _finalize(stats)

    named_worker_ids = (stats_filter or {}).get("worker_ids")
    if named_worker_ids:
        result = [
            stats for stats in stats_by_worker.values() if stats["id"] in named_worker_ids
        ]
    else:
        result = [
            stats for stats in stats_by_worker.values() if stats["total_earnings"] != 0
        ]

    return sorted(result, key=lambda stats: stats["total_earnings"], reverse=True)


def summarize(
    entries: list[WorkEntry],
    workers: list[Worker],
    stats_filter: Optional[StatsFilter] = None,
) -> ProjectTotals:
    """Project-wide totals over the same filter as aggregate()."""
    totals = get_project_totals_template()
    workers_by_id = {worker["id"]: worker for worker in workers}
    named_worker_ids = (stats_filter or {}).get("worker_ids")

    for entry in filter_entries(entries, stats_filter):
        work_type = str(work_type_of(entry))
        totals["entries"] += 1
        totals["total_hours"] += entry["duration"]
        totals["hours_by_type"][work_type] += entry["duration"]

        if work_type == WorkType.PANELING:
            totals["panels"] += cast(PanelingWorkEntry, entry)["module_count"] or 0
        elif work_type == WorkType.CABLES:
            totals["tables"] += 1

        worker_count = len(entry["worker_ids"])
        for worker_id in entry["worker_ids"]:
            if named_worker_ids and worker_id not in named_worker_ids:
                continue
            worker = workers_by_id.get(worker_id)
            if worker is None:
                continue
            earnings_share = _earnings_share(entry, worker, worker_count)
            totals["total_earnings"] += earnings_share
            totals["earnings_by_type"][work_type] += earnings_share

    return totals


def collect_rate_gaps(
    entries: list[WorkEntry],
    workers: list[Worker],
    stats_filter: Optional[StatsFilter] = None,
) -> list[RateGap]:
    """Distinct (worker, work type, reason) gaps that produced zero earnings."""
    workers_by_id = {worker["id"]: worker for worker in workers}
    seen: set[tuple[str, str, str]] = set()
    gaps: list[RateGap] = []

    for entry in filter_entries(entries, stats_filter):
        for worker_id in entry["worker_ids"]:
            worker = workers_by_id.get(worker_id)
            if worker is None:
                continue
            for gap in find_rate_gaps(entry, worker):
                key = (gap["worker_id"], gap["work_type"], gap["reason"])
                if key in seen:
                    continue
                seen.add(key)
                gaps.append(gap)
                logger.warning(
                    "%s has no %s rate configured (%s), earnings counted as 0",
                    gap["worker_name"],
                    gap["work_type"],
                    gap["reason"],
                )

    return gaps
