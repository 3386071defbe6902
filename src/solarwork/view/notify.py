# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.padding import Padding

console = Console(stderr=True)


def notify_error(message: str) -> None:
    console.print(Padding(f"[bold red]{message}[/bold red]", (1, 0, 0, 1)))


def notify_warning(message: str) -> None:
    console.print(Padding(f"[yellow]{message}[/yellow]", (0, 0, 0, 1)))


def notify_success(message: str) -> None:
    console.print(Padding(f"[green]{message}[/green]", (0, 0, 0, 1)))
