# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Forecast(TypedDict):
    total_tables: int
    completed_tables: int
    unique_days_worked: int
    tables_per_day: float
    # None when there is no velocity to project from
    remaining_days: Optional[int]
    completion_date: Optional[pendulum.Date]
    has_forecast: bool


class Progress(TypedDict):
    total_tables: int
    completed_tables: int
    remaining_tables: list[str]
    percent_complete: float
