# SPDX-License-Identifier: MIT

import math
from typing import Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from sitegantt.color import GRID_COLOR, TASK_KEY_COLOR, TODAY_MARKER_COLOR, status_color
from sitegantt.model.enhanced_task import EnhancedTask
from sitegantt.model.gantt_layout import GanttLayout, GanttStats
from sitegantt.model.position import TaskPosition, TodayMarker
from sitegantt.model.status import status_display
from sitegantt.model.timeline_unit import TimelineUnit
from sitegantt.service.deadline import deadline_caption
from sitegantt.service.position import span_ratio
from sitegantt.time import date_to_display_str, date_to_display_str_optional
from sitegantt.view.header import header
from sitegantt.view.state import get_left_column_width

MIN_GRID_WIDTH = 10
BAR_CHAR = "█"
MARKER_CHAR = "│"


def percent_to_column(percent: float, grid_width: int) -> int:
    """Map a 0-100 percentage onto a character column inside the grid."""
    return min(grid_width - 1, max(0, math.floor(percent * grid_width / 100)))


def bar_columns(position: TaskPosition, grid_width: int) -> Optional[tuple[int, int]]:
    """
    Half-open [first, last) character range covered by a task bar.

    Invisible bars have no range. A visible bar always covers at least one
    column.
    """
    if not position["visible"]:
        return None
    first = percent_to_column(position["left"], grid_width)
    last = math.ceil((position["left"] + position["width"]) * grid_width / 100)
    return first, min(grid_width, max(first + 1, last))


def marker_column(marker: TodayMarker, grid_width: int) -> Optional[int]:
    if not marker["visible"]:
        return None
    return percent_to_column(marker["position"], grid_width)


def unit_columns(units: list[TimelineUnit], grid_width: int) -> list[int]:
    """Starting column of each unit, in the same percentage space as the bars."""
    return [
        percent_to_column(span_ratio(unit["start"], units), grid_width) for unit in units
    ]


def _fit(text: str, width: int) -> str:
    if len(text) > width:
        return text[: max(0, width - 3)] + "..."
    return text.ljust(width)


def _build_unit_header(
    units: list[TimelineUnit], left_column_width: int, grid_width: int
) -> Text:
    row = Text(" " * left_column_width)
    starts = unit_columns(units, grid_width)
    ends = starts[1:] + [grid_width]
    for unit, start, end in zip(units, starts, ends):
        cell_width = end - start
        if cell_width <= 0:
            continue
        label = unit["label"]
        if unit["is_aggregate"]:
            label = f"{label} {unit['year']}"
        row.append(_fit(label, cell_width), style="bold")
    return row


def _build_task_row(
    task: EnhancedTask,
    marker_col: Optional[int],
    left_column_width: int,
    grid_width: int,
) -> Text:
    color = status_color(task["effective_status"])

    row = Text()
    row.append(f"{task['task_key']:>3} ", style=TASK_KEY_COLOR)
    row.append(_fit(task["title"], left_column_width - 4), style=color)

    columns = bar_columns(task["position"], grid_width)
    for col in range(grid_width):
        if columns is not None and columns[0] <= col < columns[1]:
            row.append(BAR_CHAR, style=color)
        elif col == marker_col:
            row.append(MARKER_CHAR, style=TODAY_MARKER_COLOR)
        else:
            row.append("·", style=GRID_COLOR)
    return row


def _build_details_table(tasks: list[EnhancedTask]) -> Table:
    table = Table(box=None, padding=(0, 1))
    table.add_column("Key", style=TASK_KEY_COLOR)
    table.add_column("Task")
    table.add_column("Project", style="cyan")
    table.add_column("Status")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Deadline")

    for task in tasks:
        position = task["position"]
        caption = deadline_caption(task["days_until_deadline"], task["is_overdue"])
        table.add_row(
            task["task_key"],
            task["title"],
            task["project_name"],
            Text(
                status_display(task["effective_status"]),
                style=status_color(task["effective_status"]),
            ),
            date_to_display_str_optional(position["actual_start"]),
            date_to_display_str_optional(position["actual_end"]),
            Text(caption or "", style="red" if task["is_overdue"] else ""),
        )
    return table


def gantt_view(
    layout: GanttLayout,
    title: str,
    left_column_width: Optional[int] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Render a laid-out Gantt chart to the terminal.

    Args:
        layout: The output of the layout engine
        title: Timeline title shown in the header
        left_column_width: Width of the key and title column (defaults to the
            configured width)
        console: Console to print to (a fresh one when omitted)
    """
    if console is None:
        console = Console()
    if left_column_width is None:
        left_column_width = get_left_column_width()

    header(title, f"Today: {date_to_display_str(layout['today'])}", console)

    if not layout["tasks"]:
        console.print("\n[dim]No tasks to display[/dim]\n")
        return

    grid_width = max(MIN_GRID_WIDTH, console.width - left_column_width - 1)
    marker_col = marker_column(layout["today_marker"], grid_width)

    rows: list[Text | Table] = [
        _build_unit_header(layout["units"], left_column_width, grid_width),
        Text("─" * (left_column_width + grid_width), style="dim"),
    ]
    rows.extend(
        _build_task_row(task, marker_col, left_column_width, grid_width)
        for task in layout["tasks"]
    )
    rows.append(Text())
    rows.append(_build_details_table(layout["tasks"]))

    console.print(Padding(Group(*rows), (1, 0, 1, 0)))


def stats_view(stats: GanttStats, title: str, console: Optional[Console] = None) -> None:
    if console is None:
        console = Console()

    header(title, "Statistics", console)

    table = Table()
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="magenta", justify="right")
    table.add_row("Total tasks", str(stats["total"]))
    table.add_row("Completed", str(stats["completed"]))
    table.add_row("In progress", str(stats["in_progress"]))
    table.add_row("Delayed", Text(str(stats["delayed"]), style="red"))
    table.add_row("Average progress", f"{stats['avg_progress']}%")

    console.print(table)
