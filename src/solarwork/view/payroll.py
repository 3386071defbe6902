# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from solarwork.model.stats import ProjectTotals, RateGap, WorkerStats
from solarwork.time import hours_to_str
from solarwork.view.header import header
from solarwork.view.util import format_money, format_number, format_percent

_GAP_REASONS = {
    "rate_missing": "no rate configured",
    "size_missing": "table size missing",
}


def payroll_report(
    stats: list[WorkerStats],
    totals: ProjectTotals,
    rate_gaps: list[RateGap],
    title: str,
    context: str,
    detailed: bool = False,
) -> None:
    header(title, context)
    console = Console()

    if len(stats) == 0:
        console.print("[italic] no earnings for this selection[/italic]")
    else:
        console.print(_stats_table(stats))
        if detailed:
            for worker_stats in stats:
                console.print(_detail_table(worker_stats))

    console.print(_totals_table(totals))

    for gap in rate_gaps:
        console.print(
            f" [yellow]warning:[/yellow] {gap['worker_name']}, {gap['work_type']}: "
            f"{_GAP_REASONS.get(gap['reason'], gap['reason'])}, counted as €0"
        )


def _stats_table(stats: list[WorkerStats]) -> Table:
    stats_table = Table(box=box.SIMPLE)
    for column in ["worker", "hours", "earnings", "€/h", "panels", "tables"]:
        stats_table.add_column(column)

    for worker_stats in stats:
        stats_table.add_row(
            worker_stats["name"],
            hours_to_str(worker_stats["total_hours"]),
            format_money(worker_stats["total_earnings"]),
            format_money(worker_stats["avg_hourly_wage"]),
            format_number(worker_stats["paneling"]["panels"]),
            format_number(worker_stats["cables"]["tables"]["total"]),
        )

    stats_table.add_row(
        "",
        hours_to_str(sum(s["total_hours"] for s in stats)),
        format_money(sum(s["total_earnings"] for s in stats)),
        "",
        "",
        "",
        style="bold",
    )
    return stats_table


def _detail_table(worker_stats: WorkerStats) -> Table:
    detail_table = Table(box=box.SIMPLE, title=worker_stats["name"], title_justify="left")
    for column in ["work", "performance", "earnings"]:
        detail_table.add_column(column)

    detail_table.add_row(
        "hourly",
        f"{hours_to_str(worker_stats['hourly']['hours'])} h",
        format_money(worker_stats["hourly"]["earnings"]),
    )
    detail_table.add_row(
        "construction",
        f"{hours_to_str(worker_stats['construction']['hours'])} h",
        format_money(worker_stats["construction"]["earnings"]),
    )
    detail_table.add_row(
        "paneling",
        f"{format_number(worker_stats['paneling']['panels'])} panels",
        format_money(worker_stats["paneling"]["earnings"]),
    )
    cables = worker_stats["cables"]
    tables = cables["tables"]
    detail_table.add_row(
        "cables",
        f"{format_number(tables['total'])} tables "
        f"(S {format_number(tables['small'])} / M {format_number(tables['medium'])} "
        f"/ L {format_number(tables['large'])}), "
        f"{format_number(cables['tables_per_hour'])}/h, "
        f"{format_money(cables['euros_per_table'])}/table, "
        f"{format_percent(cables['shared_tables_percent'])} shared",
        format_money(cables["earnings"]),
    )
    return detail_table


def _totals_table(totals: ProjectTotals) -> Table:
    totals_table = Table(box=box.SIMPLE, title="totals", title_justify="left")
    for column in ["type", "hours", "earnings"]:
        totals_table.add_column(column)

    for work_type, hours in totals["hours_by_type"].items():
        totals_table.add_row(
            work_type,
            hours_to_str(hours),
            format_money(totals["earnings_by_type"][work_type]),
        )
    totals_table.add_row(
        f"{totals['entries']} entries, {totals['panels']} panels, {totals['tables']} tables",
        hours_to_str(totals["total_hours"]),
        format_money(totals["total_earnings"]),
        style="bold",
    )
    return totals_table
