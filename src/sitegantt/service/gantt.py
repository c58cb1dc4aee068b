# SPDX-License-Identifier: MIT

import logging
from typing import NamedTuple, Optional, cast

import pendulum

from sitegantt import time
from sitegantt.model.enhanced_task import EnhancedTask
from sitegantt.model.entity_id import EntityId
from sitegantt.model.filter import TaskFilter
from sitegantt.model.gantt_layout import GanttLayout
from sitegantt.model.project import Project
from sitegantt.model.task import Task
from sitegantt.model.task_key_scope import TaskKeyScope
from sitegantt.model.timeline_unit import TimelineUnit
from sitegantt.model.view_mode import ViewMode
from sitegantt.query.filter import filter_tasks
from sitegantt.service.deadline import evaluate_deadline
from sitegantt.service.position import position_task, today_marker
from sitegantt.service.task_key import assign_task_keys
from sitegantt.service.timeline import generate_timeline_units, get_date_extents

logger = logging.getLogger(__name__)

UNKNOWN_PROJECT_NAME = "Unknown Project"


class ScheduledTask(NamedTuple):
    task: Task
    start: Optional[pendulum.Date]
    end: Optional[pendulum.Date]


def schedule_task(task: Task) -> ScheduledTask:
    """Parse a task's stored date strings, naming the task in any parse error."""
    return ScheduledTask(
        task=task,
        start=time.parse_calendar_date_optional(
            task["start_date"], f"task {task['id']} start_date"
        ),
        end=time.parse_calendar_date_optional(
            task["end_date"], f"task {task['id']} end_date"
        ),
    )


def _dated(scheduled: list[ScheduledTask]) -> list[tuple[pendulum.Date, pendulum.Date]]:
    return [
        (item.start, item.end)
        for item in scheduled
        if item.start is not None and item.end is not None
    ]


def enhance_task(
    scheduled: ScheduledTask,
    units: list[TimelineUnit],
    today: pendulum.Date,
    task_key: str,
    project: Optional[Project],
) -> EnhancedTask:
    task = scheduled.task
    deadline = evaluate_deadline(scheduled.end, task["status"], today)
    return cast(
        EnhancedTask,
        {
            **task,
            "project_name": project["name"] if project else UNKNOWN_PROJECT_NAME,
            "project_client": project["client"] if project else None,
            "is_overdue": deadline.is_overdue,
            "days_until_deadline": deadline.days_until_deadline,
            "effective_status": deadline.effective_status,
            "task_key": task_key,
            "position": position_task(scheduled.start, scheduled.end, units),
        },
    )


def build_gantt_layout(
    tasks: list[Task],
    projects: list[Project],
    view_mode: ViewMode,
    reference_period: Optional[pendulum.Date] = None,
    selected_project_id: Optional[EntityId] = None,
    task_filter: Optional[TaskFilter] = None,
    today: Optional[pendulum.Date] = None,
    key_scope: TaskKeyScope = TaskKeyScope.PROJECT,
    utc_offset_hours: int = time.SITE_UTC_OFFSET_HOURS,
) -> GanttLayout:
    """
    Lay out a Gantt chart from raw task and project records.

    The clock is sampled at most once; the same `today` drives deadlines, the
    unit generator and the today marker. Keys are assigned over the full task
    list before scoping and filtering so a task keeps its key whatever is shown.

    Args:
        tasks: Task records as delivered by the persistence layer
        projects: Project records, used for names and clients
        view_mode: The display granularity
        reference_period: The navigated-to date (defaults to today)
        selected_project_id: Scope the chart to one project's tasks
        task_filter: Filter bar criteria applied to the enhanced rows
        today: A pre-sampled "today"; sampled from the site clock when omitted
        key_scope: Whether task keys restart per project or run globally
        utc_offset_hours: Offset of the site clock when sampling today

    Returns:
        The timeline units, the enhanced (scoped and filtered) tasks and the
        today marker

    Raises:
        DateParseError: if a task carries a malformed date string
    """
    if today is None:
        today = time.today(utc_offset_hours)
    if reference_period is None:
        reference_period = today

    scheduled = [schedule_task(task) for task in tasks]
    task_keys = assign_task_keys(tasks, key_scope)
    projects_by_id = {project["id"]: project for project in projects}

    if selected_project_id is not None:
        scoped = [
            item for item in scheduled if item.task["project_id"] == selected_project_id
        ]
        project_extents = get_date_extents(_dated(scoped))
        if project_extents is None:
            logger.debug(
                "project %s has no dated tasks, using unscoped timeline",
                selected_project_id,
            )
    else:
        scoped = scheduled
        project_extents = None

    units = generate_timeline_units(
        view_mode,
        reference_period,
        today,
        task_extents=get_date_extents(_dated(scoped)),
        project_extents=project_extents,
    )

    enhanced = [
        enhance_task(
            item,
            units,
            today,
            task_keys[item.task["id"]],
            projects_by_id.get(item.task["project_id"] or ""),
        )
        for item in scoped
    ]
    visible_tasks = filter_tasks(enhanced, task_filter)

    logger.debug(
        "laid out %d of %d task(s) over %d unit(s) for %s",
        len(visible_tasks),
        len(tasks),
        len(units),
        today,
    )

    return {
        "today": today,
        "view_mode": view_mode,
        "reference_period": reference_period,
        "units": units,
        "tasks": visible_tasks,
        "today_marker": today_marker(view_mode, units, today),
    }
