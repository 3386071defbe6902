# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from solarwork.model.entity_id import EntityId
from solarwork.model.work_type import TableSize
from solarwork.time import date_from_str, datetime_from_str_utc

_MONTH_P = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param)

    # YYYY-MM-DD with optional time component
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str_utc(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid datetime '{datetime}': {e}")

    # (H)H:mm, today's date
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", datetime)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))

        if hour < 0 or hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute < 0 or minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

        pendulum_date_time = pendulum.today("local").set(
            hour=hour, minute=minute, second=0, microsecond=0
        )
        return pendulum_date_time.in_tz("UTC")

    if datetime == "now" or datetime == "n":
        return pendulum.now().in_tz("UTC")
    raise typer.BadParameter("Incorrect datetime format")


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = str(date_param)

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date '{date}': {e}")

    # Relative days, e.g. "-1"
    if re.match(r"^-?\d+$", date):
        return pendulum.today("local").add(days=int(date)).date()

    if date == "today" or date == "t":
        return pendulum.today("local").date()
    if date == "yesterday" or date == "y":
        return pendulum.yesterday("local").date()
    raise typer.BadParameter("Incorrect date format")


def parse_month(month_param: Optional[str]) -> Optional[str]:
    if month_param is None:
        return None
    if month_param in ("this", "current"):
        return pendulum.today("local").format("YYYY-MM")
    if month_param in ("last", "previous"):
        return pendulum.today("local").subtract(months=1).format("YYYY-MM")
    if not _MONTH_P.match(month_param):
        raise typer.BadParameter(
            f"Month must be in YYYY-MM format, got '{month_param}'"
        )
    return month_param


def parse_table_sizes(
    tables_param: str, default_size: Optional[str] = None
) -> dict[str, str]:
    """
    Parse 'T1:small, T2:large, T3' into a table to size map.

    Tables without an explicit size get default_size.
    """
    table_sizes: dict[str, str] = {}
    for term in tables_param.split(","):
        term = term.strip()
        if not term:
            continue

        table, _, size = term.partition(":")
        table = table.strip()
        size = size.strip() or (default_size or "")
        if not size:
            raise typer.BadParameter(
                f"Table '{table}' has no size. Use '{table}:medium' or --size."
            )
        if size not in [s.value for s in TableSize]:
            raise typer.BadParameter(
                f"Unknown table size '{size}'. "
                f"Valid sizes: {', '.join(s.value for s in TableSize)}"
            )
        table_sizes[table] = size

    if len(table_sizes) == 0:
        raise typer.BadParameter("No tables provided")
    return table_sizes


def resolve_id(id_param: str, known_ids: list[EntityId], kind: str) -> EntityId:
    """Resolve a full id or a unique id prefix."""
    if id_param in known_ids:
        return id_param

    matches = [id for id in known_ids if id.startswith(id_param)]
    if len(matches) == 1:
        return matches[0]
    if len(matches) == 0:
        raise typer.BadParameter(f"No {kind} with id '{id_param}'")
    raise typer.BadParameter(f"Ambiguous {kind} id '{id_param}'")


def resolve_id_list(
    id_param: Optional[list[str]], known_ids: list[EntityId], kind: str
) -> list[EntityId]:
    """Resolve repeated and comma separated ids, keeping order."""
    if id_param is None:
        return []
    ids: list[EntityId] = []
    for param in id_param:
        for id_str in param.split(","):
            id_str = id_str.strip()
            if id_str:
                ids.append(resolve_id(id_str, known_ids, kind))
    return ids
