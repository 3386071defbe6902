# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from solarwork.model.entity_id import EntityId


class StatsFilter(TypedDict, total=False):
    """All dimensions are optional and AND-combined."""

    project_id: Optional[EntityId]
    start_date: Optional[pendulum.Date]  # inclusive
    end_date: Optional[pendulum.Date]  # inclusive
    worker_ids: Optional[list[EntityId]]
    work_types: Optional[list[str]]
