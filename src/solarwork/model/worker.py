# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from solarwork.model.entity_id import EntityId


class Worker(TypedDict):
    id: Optional[EntityId]
    name: str
    rate: Optional[float]  # per hour, hourly and construction work
    panel_rate: Optional[float]  # per panel
    cable_rate_small: Optional[float]  # per table
    cable_rate_medium: Optional[float]
    cable_rate_large: Optional[float]
