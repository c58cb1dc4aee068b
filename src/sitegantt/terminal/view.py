# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
import yaml
from rich.console import Console

from sitegantt import time
from sitegantt.model.filter import TaskFilter
from sitegantt.model.gantt_layout import GanttLayout
from sitegantt.model.status import EffectiveStatus, Priority
from sitegantt.model.view_mode import ViewMode
from sitegantt.repository.configuration import CONFIGURATION_REPO
from sitegantt.repository.project import PROJECT_REPO
from sitegantt.repository.task import TASK_REPO
from sitegantt.service.gantt import build_gantt_layout
from sitegantt.service.navigation import navigate_period, timeline_title
from sitegantt.service.stats import compute_stats
from sitegantt.terminal.custom_typer import AliasedTyperGroup
from sitegantt.terminal.parse import parse_date
from sitegantt.view.gantt import gantt_view, stats_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

error_console = Console(stderr=True)


def _fail(message: str) -> typer.Exit:
    error_console.print(f"[bold red]Error:[/bold red] {message}")
    return typer.Exit(code=1)


def _build_layout(
    mode: Optional[ViewMode],
    period: Optional[str],
    back: int,
    forward: int,
    project: Optional[str],
    status: Optional[EffectiveStatus],
    priority: Optional[Priority],
    search: Optional[str],
) -> tuple[GanttLayout, str]:
    config = CONFIGURATION_REPO.get_config()
    view_mode = mode if mode is not None else CONFIGURATION_REPO.get_view_mode()
    today = time.today(config["utc_offset_hours"])

    reference_period = parse_date(period, today) or today
    for _ in range(back):
        reference_period = navigate_period("prev", view_mode, reference_period)
    for _ in range(forward):
        reference_period = navigate_period("next", view_mode, reference_period)

    task_filter: TaskFilter = {}
    if status is not None:
        task_filter["status"] = status.value
    if priority is not None:
        task_filter["priority"] = priority.value
    if search is not None:
        task_filter["search"] = search

    try:
        project_name = (
            PROJECT_REPO.get_project(project)["name"] if project is not None else None
        )
        layout = build_gantt_layout(
            TASK_REPO.get_all_tasks(),
            PROJECT_REPO.get_all_projects(),
            view_mode,
            reference_period=reference_period,
            selected_project_id=project,
            task_filter=task_filter,
            today=today,
            key_scope=CONFIGURATION_REPO.get_task_key_scope(),
        )
    except (ValueError, yaml.YAMLError) as e:
        raise _fail(str(e)) from e

    return layout, timeline_title(view_mode, reference_period, project_name)


@app.command("gantt, g")
def gantt(
    mode: Annotated[
        Optional[ViewMode],
        typer.Option("--mode", "-m", help="View mode (defaults to configuration)"),
    ] = None,
    period: Annotated[
        Optional[str],
        typer.Option(
            "--period",
            "-p",
            help="Reference date: YYYY-MM-DD, day offset, today/t, yesterday/y, tomorrow/o",
        ),
    ] = None,
    back: Annotated[
        int,
        typer.Option("--back", "-b", count=True, help="Step the period back"),
    ] = 0,
    forward: Annotated[
        int,
        typer.Option("--forward", "-f", count=True, help="Step the period forward"),
    ] = 0,
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-pr", help="Scope the timeline to a project id"),
    ] = None,
    status: Annotated[
        Optional[EffectiveStatus],
        typer.Option("--status", "-s", help="Only tasks with this displayed status"),
    ] = None,
    priority: Annotated[
        Optional[Priority],
        typer.Option("--priority", "-pi", help="Only tasks with this priority"),
    ] = None,
    search: Annotated[
        Optional[str],
        typer.Option(
            "--search", "-q", help="Match title, project, client or description"
        ),
    ] = None,
) -> None:
    """Render the task timeline as a Gantt chart."""
    layout, title = _build_layout(
        mode, period, back, forward, project, status, priority, search
    )
    gantt_view(layout, title)


@app.command("stats, s")
def stats(
    mode: Annotated[
        Optional[ViewMode],
        typer.Option("--mode", "-m", help="View mode (defaults to configuration)"),
    ] = None,
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-pr", help="Scope the statistics to a project id"),
    ] = None,
    status: Annotated[
        Optional[EffectiveStatus],
        typer.Option("--status", "-s", help="Only tasks with this displayed status"),
    ] = None,
    priority: Annotated[
        Optional[Priority],
        typer.Option("--priority", "-pi", help="Only tasks with this priority"),
    ] = None,
    search: Annotated[
        Optional[str],
        typer.Option(
            "--search", "-q", help="Match title, project, client or description"
        ),
    ] = None,
) -> None:
    """Summarise the shown tasks: totals, delays and average progress."""
    layout, title = _build_layout(
        mode, None, 0, 0, project, status, priority, search
    )
    stats_view(compute_stats(layout["tasks"]), title)
