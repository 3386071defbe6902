# SPDX-License-Identifier: MIT

from typing import Optional

from solarwork.model.stats import RateGap
from solarwork.model.work_entry import WorkEntry
from solarwork.model.work_type import EntryType, TableSize, TaskSubType, WorkType
from solarwork.model.worker import Worker

CABLE_RATE_FIELDS = {
    TableSize.SMALL: "cable_rate_small",
    TableSize.MEDIUM: "cable_rate_medium",
    TableSize.LARGE: "cable_rate_large",
}


def work_type_of(entry: WorkEntry) -> WorkType:
    """Flatten the type/sub_type discriminators into a single tag."""
    match entry["type"]:
        case EntryType.HOURLY:
            return WorkType.HOURLY
        case EntryType.TASK:
            match entry.get("sub_type"):
                case TaskSubType.PANELING:
                    return WorkType.PANELING
                case TaskSubType.CONSTRUCTION:
                    return WorkType.CONSTRUCTION
                case TaskSubType.CABLES:
                    return WorkType.CABLES
    raise ValueError(
        f"unknown work entry variant: type={entry['type']!r} sub_type={entry.get('sub_type')!r}"
    )


def _rate_value(worker: Worker, field: str) -> float:
    value = worker.get(field)
    if value is None:
        return 0.0
    return float(value)  # type: ignore[arg-type]


def _cable_rate_field(table_size: Optional[str]) -> Optional[str]:
    if table_size is None:
        return None
    try:
        return CABLE_RATE_FIELDS[TableSize(table_size)]
    except ValueError:
        return None


def resolve_rate(entry: WorkEntry, worker: Worker) -> float:
    """
    Rate of a single worker for the entry's variant.

    - hourly, construction: per hour
    - paneling: per panel
    - cables: per table, selected by table size

    Unset rates and unknown table sizes resolve to 0.
    """
    match work_type_of(entry):
        case WorkType.HOURLY | WorkType.CONSTRUCTION:
            return _rate_value(worker, "rate")
        case WorkType.PANELING:
            return _rate_value(worker, "panel_rate")
        case WorkType.CABLES:
            field = _cable_rate_field(entry.get("table_size"))  # type: ignore[arg-type]
            if field is None:
                return 0.0
            return _rate_value(worker, field)


def find_rate_gaps(entry: WorkEntry, worker: Worker) -> list[RateGap]:
    """Explain why resolve_rate would return 0 for this worker and entry."""
    work_type = work_type_of(entry)
    reason: Optional[str] = None

    match work_type:
        case WorkType.HOURLY | WorkType.CONSTRUCTION:
            if not worker.get("rate"):
                reason = "rate_missing"
        case WorkType.PANELING:
            if not worker.get("panel_rate"):
                reason = "rate_missing"
        case WorkType.CABLES:
            field = _cable_rate_field(entry.get("table_size"))  # type: ignore[arg-type]
            if field is None:
                reason = "size_missing"
            elif not worker.get(field):
                reason = "rate_missing"

    if reason is None:
        return []
    return [
        {
            "worker_id": worker["id"] or "",
            "worker_name": worker["name"],
            "work_type": str(work_type),
            "reason": reason,
            "entry_id": entry["id"],
        }
    ]
