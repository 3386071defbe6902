# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from solarwork import configuration
from solarwork.repository.configuration import CONFIGURATION_REPO
from solarwork.repository.settings import SETTINGS_REPO
from solarwork.terminal.custom_typer import AliasedTyperGroup
from solarwork.view.notify import notify_error

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@app.command("show, s")
def show() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("log_level", config["log_level"])
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("default_theme", config["default_theme"])
    table.add_row("default_locale", config["default_locale"])
    table.add_row(
        "max_workers_per_entry", str(config.get("max_workers_per_entry", 2))
    )
    table.add_row("theme", SETTINGS_REPO.get_theme() or "")
    table.add_row("locale", SETTINGS_REPO.get_locale() or "")

    console.print(table)

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        from yaml import Loader  # type: ignore[assignment] # noqa: F401

        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="directory holding the data files"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="use the platform data directory"),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=", ".join(LOG_LEVELS)),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header"),
    ] = None,
    default_theme: Annotated[Optional[str], typer.Option("--default-theme")] = None,
    default_locale: Annotated[Optional[str], typer.Option("--default-locale")] = None,
    max_workers_per_entry: Annotated[
        Optional[int], typer.Option("--max-workers", min=1)
    ] = None,
    theme: Annotated[Optional[str], typer.Option("--theme")] = None,
    locale: Annotated[Optional[str], typer.Option("--locale")] = None,
) -> None:
    """Update configuration settings."""
    if data_path is not None and remove_data_path:
        notify_error("Use either --data-path or --remove-data-path")
        raise typer.Exit(1)
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        notify_error(
            f"Unknown log level '{log_level}'. Valid levels: {', '.join(LOG_LEVELS)}"
        )
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        log_level=log_level,
        show_header=show_header,
        default_theme=default_theme,
        default_locale=default_locale,
        max_workers_per_entry=max_workers_per_entry,
    )
    if log_level is not None:
        logging.getLogger("solarwork").setLevel(log_level.upper())

    if theme is not None:
        SETTINGS_REPO.set_theme(theme)
    if locale is not None:
        SETTINGS_REPO.set_locale(locale)

    show()
