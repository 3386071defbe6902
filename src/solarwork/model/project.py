# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from solarwork.model.entity_id import EntityId


class Project(TypedDict):
    id: Optional[EntityId]
    name: str
    status: str  # active | completed | paused
    tables: list[str]  # fixed universe of installable tables
    worker_ids: list[EntityId]  # roster
