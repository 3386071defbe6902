# SPDX-License-Identifier: MIT

from typing import Optional


def format_money(amount: Optional[float]) -> str:
    if amount is None:
        return ""
    return f"€{amount:.2f}"


def format_rate(rate: Optional[float], unit: str) -> str:
    if rate is None:
        return "[italic]unset[/italic]"
    return f"€{rate:.2f}/{unit}"


def format_number(value: float, digits: int = 2) -> str:
    return f"{value:.{digits}f}"


def format_percent(value: float) -> str:
    return f"{value:.1f}%"
