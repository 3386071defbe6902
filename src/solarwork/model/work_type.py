# SPDX-License-Identifier: MIT

from enum import StrEnum


class EntryType(StrEnum):
    HOURLY = "hourly"
    TASK = "task"


class TaskSubType(StrEnum):
    PANELING = "paneling"
    CONSTRUCTION = "construction"
    CABLES = "cables"


class WorkType(StrEnum):
    """Flat tag for an entry variant, used by filters and reports."""

    HOURLY = "hourly"
    PANELING = "paneling"
    CONSTRUCTION = "construction"
    CABLES = "cables"


class TableSize(StrEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ProjectStatus(StrEnum):
    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"
