# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from sitegantt import configuration
from sitegantt.model.task_key_scope import TaskKeyScope
from sitegantt.model.view_mode import ViewMode
from sitegantt.repository.configuration import CONFIGURATION_REPO
from sitegantt.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _configuration_table(
    config: configuration.Configuration, title: Optional[str] = None
) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("utc_offset_hours", f"UTC{config['utc_offset_hours']:+d}")
    table.add_row("default_view_mode", config["default_view_mode"])
    table.add_row("task_key_scope", config["task_key_scope"])
    table.add_row("left_column_width", str(config["left_column_width"]))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "data_path",
        config["data_path"] if config["data_path"] else "None (default data directory)",
    )
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_configuration_table(config))
    console.print(f"Data directory: {configuration.DATA_PATH}")


@app.command("set, s")
def set(
    utc_offset_hours: Annotated[
        Optional[int],
        typer.Option(
            "--utc-offset-hours",
            help="UTC offset of the site clock used for 'today' (-12 to 14)",
        ),
    ] = None,
    default_view_mode: Annotated[
        Optional[ViewMode],
        typer.Option("--default-view-mode", help="View mode used when none is given"),
    ] = None,
    task_key_scope: Annotated[
        Optional[TaskKeyScope],
        typer.Option(
            "--task-key-scope",
            help="Restart task keys per project or run them across all tasks",
        ),
    ] = None,
    left_column_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-column-width", min=10, help="Width of the task title column"
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above reports",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory holding tasks.yaml and projects.yaml",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to None (use the default data directory)",
        ),
    ] = False,
) -> None:
    """
    Update configuration settings.
    """
    console = Console()

    try:
        CONFIGURATION_REPO.update_config(
            utc_offset_hours=utc_offset_hours,
            default_view_mode=default_view_mode,
            task_key_scope=task_key_scope,
            left_column_width=left_column_width,
            show_header=show_header,
            data_path=data_path,
            remove_data_path=remove_data_path,
        )
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(
        _configuration_table(CONFIGURATION_REPO.get_config(), "Updated Configuration")
    )
