# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from solarwork.model.worker import Worker
from solarwork.view.header import header
from solarwork.view.util import format_rate


def workers_report(workers: list[Worker], title: str = "workers") -> None:
    header(title)

    workers_table = Table(box=box.SIMPLE)
    for column in ["id", "name", "hourly", "panel", "small", "medium", "large"]:
        workers_table.add_column(column)

    for worker in workers:
        workers_table.add_row(
            worker["id"] or "",
            worker["name"],
            format_rate(worker["rate"], "h"),
            format_rate(worker["panel_rate"], "panel"),
            format_rate(worker["cable_rate_small"], "table"),
            format_rate(worker["cable_rate_medium"], "table"),
            format_rate(worker["cable_rate_large"], "table"),
        )

    console = Console()
    console.print(workers_table)
