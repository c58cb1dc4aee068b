# SPDX-License-Identifier: MIT

import logging
import math
from typing import Optional

import pendulum

from sitegantt.model.timeline_unit import DateExtents, TimelineUnit
from sitegantt.model.view_mode import ViewMode
from sitegantt.time import (
    add_months,
    days_between,
    end_of_month,
    end_of_quarter,
    end_of_week,
    max_date,
    min_date,
    months_between,
    quarter_of,
    start_of_month,
    start_of_quarter,
    start_of_week,
)

logger = logging.getLogger(__name__)

DAILY_WINDOW_DAYS = 14
DAILY_DAYS_BEFORE = 7
DAILY_MIN_DAYS = 7
DAILY_MAX_DAYS = 60

WEEKLY_MIN_WEEKS = 4
WEEKLY_MAX_WEEKS = 16

MONTHLY_WINDOW_MONTHS = 6
MONTHLY_MONTHS_BEFORE = 2
MONTHLY_MIN_MONTHS = 3
MONTHLY_MAX_MONTHS = 24

# Inclusive month spans at which the full view switches granularity
FULL_MONTHLY_MAX_SPAN = 12
FULL_BIMONTHLY_MAX_SPAN = 24


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def get_date_extents(
    dates: list[tuple[pendulum.Date, pendulum.Date]],
) -> Optional[DateExtents]:
    """
    Earliest start and latest end over a list of (start, end) pairs.

    Returns None for an empty list so callers can fall back to unscoped output.
    """
    if not dates:
        return None
    return {
        "start": min_date(start for start, _ in dates),
        "end": max_date(end for _, end in dates),
    }


def day_unit(day: pendulum.Date) -> TimelineUnit:
    return {
        "label": day.format("MMM D"),
        "start": day,
        "end": day,
        "year": day.year,
        "quarter": quarter_of(day),
        "is_aggregate": False,
    }


def week_unit(week_start: pendulum.Date, label: str) -> TimelineUnit:
    return {
        "label": label,
        "start": week_start,
        "end": week_start.add(days=6),
        "year": week_start.year,
        "quarter": quarter_of(week_start),
        "is_aggregate": False,
    }


def month_unit(month_start: pendulum.Date, label_format: str) -> TimelineUnit:
    return {
        "label": month_start.format(label_format),
        "start": month_start,
        "end": end_of_month(month_start),
        "year": month_start.year,
        "quarter": quarter_of(month_start),
        "is_aggregate": False,
    }


def week_of_month(week_start: pendulum.Date, month_start: pendulum.Date) -> int:
    """1-based ordinal of a Sunday-anchored week within the weeks touching a month."""
    return days_between(start_of_week(month_start), week_start) // 7 + 1


def generate_daily_units(
    reference_period: pendulum.Date,
    today: pendulum.Date,
    project_extents: Optional[DateExtents] = None,
) -> list[TimelineUnit]:
    if project_extents is None:
        first_day = reference_period.subtract(days=DAILY_DAYS_BEFORE)
        day_count = DAILY_WINDOW_DAYS
    else:
        first_day = max(project_extents["start"], today)
        day_count = _clamp(
            days_between(first_day, project_extents["end"]) + 1,
            DAILY_MIN_DAYS,
            DAILY_MAX_DAYS,
        )

    return [day_unit(first_day.add(days=offset)) for offset in range(day_count)]


def generate_weekly_units(
    reference_period: pendulum.Date,
    today: pendulum.Date,
    project_extents: Optional[DateExtents] = None,
) -> list[TimelineUnit]:
    """
    Sunday to Saturday weeks.

    Unscoped, every week overlapping the reference month is returned and
    labelled by its ordinal within that month. Scoped to a project, weeks run
    from the later of the project's first week and the current week, and are
    labelled by the month each week ends in.
    """
    if project_extents is None:
        month_start = start_of_month(reference_period)
        first_week = start_of_week(month_start)
        last_week_end = end_of_week(end_of_month(month_start))
        week_count = (days_between(first_week, last_week_end) + 1) // 7
        return [
            week_unit(
                first_week.add(weeks=offset),
                f"Week {offset + 1}",
            )
            for offset in range(week_count)
        ]

    first_week = max(
        start_of_week(project_extents["start"]), start_of_week(today)
    )
    covered_days = days_between(first_week, end_of_week(project_extents["end"])) + 1
    week_count = _clamp(
        math.ceil(covered_days / 7), WEEKLY_MIN_WEEKS, WEEKLY_MAX_WEEKS
    )

    units = []
    for offset in range(week_count):
        week_start = first_week.add(weeks=offset)
        week_end = week_start.add(days=6)
        ordinal = week_of_month(week_start, start_of_month(week_end))
        units.append(week_unit(week_start, f"{week_end.format('MMM')} Week {ordinal}"))
    return units


def generate_monthly_units(
    reference_period: pendulum.Date,
    today: pendulum.Date,
    project_extents: Optional[DateExtents] = None,
) -> list[TimelineUnit]:
    if project_extents is None:
        first_month = add_months(reference_period, -MONTHLY_MONTHS_BEFORE)
        month_count = MONTHLY_WINDOW_MONTHS
    else:
        first_month = max(
            start_of_month(project_extents["start"]), start_of_month(today)
        )
        month_count = _clamp(
            months_between(first_month, project_extents["end"]),
            MONTHLY_MIN_MONTHS,
            MONTHLY_MAX_MONTHS,
        )

    return [
        month_unit(add_months(first_month, offset), "MMM YYYY")
        for offset in range(month_count)
    ]


def _generate_bimonthly_units(
    first_month: pendulum.Date, last_day: pendulum.Date
) -> list[TimelineUnit]:
    units: list[TimelineUnit] = []
    cursor = first_month
    while cursor <= last_day:
        second_month = add_months(cursor, 1)
        units.append(
            {
                "label": f"{cursor.format('MMM')}-{second_month.format('MMM')}",
                "start": cursor,
                "end": min(end_of_month(second_month), last_day),
                "year": cursor.year,
                "quarter": quarter_of(cursor),
                "is_aggregate": False,
            }
        )
        cursor = add_months(cursor, 2)
    return units


def _generate_quarter_units(
    first_quarter: pendulum.Date, last_day: pendulum.Date
) -> list[TimelineUnit]:
    units: list[TimelineUnit] = []
    cursor = first_quarter
    while cursor <= last_day:
        quarter = quarter_of(cursor)
        units.append(
            {
                "label": f"Q{quarter}",
                "start": cursor,
                "end": end_of_quarter(cursor),
                "year": cursor.year,
                "quarter": quarter,
                "is_aggregate": True,
            }
        )
        cursor = add_months(cursor, 3)
    return units


def generate_full_units(
    today: pendulum.Date, task_extents: Optional[DateExtents] = None
) -> list[TimelineUnit]:
    """
    Units covering every dated task, with granularity chosen by span.

    Up to 12 months gives one unit per month, up to 24 one unit per two
    months, anything longer one unit per quarter. The span never starts before
    today and ends at the month or quarter holding the latest task date.
    """
    if task_extents is None:
        span_start = span_end = today
    else:
        span_start = max(task_extents["start"], today)
        span_end = max(task_extents["end"], span_start)

    month_span = months_between(span_start, span_end)

    if month_span <= FULL_MONTHLY_MAX_SPAN:
        granularity = "monthly"
        first_month = start_of_month(span_start)
        units = [
            month_unit(add_months(first_month, offset), "MMM")
            for offset in range(month_span)
        ]
    elif month_span <= FULL_BIMONTHLY_MAX_SPAN:
        granularity = "bi-monthly"
        units = _generate_bimonthly_units(
            start_of_month(span_start), end_of_month(span_end)
        )
    else:
        granularity = "quarterly"
        units = _generate_quarter_units(
            start_of_quarter(span_start), end_of_quarter(span_end)
        )

    logger.debug(
        "full timeline spans %d month(s) from %s, using %s units",
        month_span,
        span_start,
        granularity,
    )
    return units


def generate_timeline_units(
    view_mode: ViewMode,
    reference_period: pendulum.Date,
    today: pendulum.Date,
    task_extents: Optional[DateExtents] = None,
    project_extents: Optional[DateExtents] = None,
) -> list[TimelineUnit]:
    """
    Generate the ordered, contiguous units for a view mode.

    Args:
        view_mode: The display granularity
        reference_period: The navigated-to date the unscoped windows centre on
        today: The single clock sample for this layout pass
        task_extents: Date extents over all visible tasks (full view only)
        project_extents: Date extents over the selected project's tasks, when
            the view is scoped to one project

    Returns:
        Units strictly ordered by start, each starting the day after the
        previous one ends
    """
    match view_mode:
        case ViewMode.DAILY:
            units = generate_daily_units(reference_period, today, project_extents)
        case ViewMode.WEEKLY:
            units = generate_weekly_units(reference_period, today, project_extents)
        case ViewMode.MONTHLY:
            units = generate_monthly_units(reference_period, today, project_extents)
        case ViewMode.FULL:
            units = generate_full_units(
                today,
                project_extents if project_extents is not None else task_extents,
            )
        case _:
            raise ValueError(f"Unsupported view mode: {view_mode!r}")

    logger.debug(
        "generated %d %s unit(s): %s to %s",
        len(units),
        view_mode.value,
        units[0]["start"],
        units[-1]["end"],
    )
    return units
