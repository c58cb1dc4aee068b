# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from sitegantt.model.position import TaskPosition, TodayMarker
from sitegantt.model.timeline_unit import TimelineUnit
from sitegantt.model.view_mode import ViewMode
from sitegantt.time import days_between, sunday_weekday

MIN_BAR_WIDTH = 1.0


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def timeline_span_days(units: list[TimelineUnit]) -> int:
    """Days from the first unit's start to the last unit's end, never below 1."""
    return max(1, days_between(units[0]["start"], units[-1]["end"]))


def span_ratio(value: pendulum.Date, units: list[TimelineUnit]) -> float:
    """Unclamped percentage of a date along the whole timeline."""
    return days_between(units[0]["start"], value) / timeline_span_days(units) * 100


def position_task(
    start_date: Optional[pendulum.Date],
    end_date: Optional[pendulum.Date],
    units: list[TimelineUnit],
) -> TaskPosition:
    """
    Project a task's [start, end] onto the timeline as left/width percentages.

    A task missing either date is unscheduled: never visible, zero width. A
    same-day task keeps a minimum width so it still renders as a thin bar.
    """
    if start_date is None or end_date is None:
        return {
            "left": 0.0,
            "width": 0.0,
            "visible": False,
            "actual_start": start_date,
            "actual_end": end_date,
        }

    left = _clamp(span_ratio(start_date, units), 0.0, 100.0)
    raw_end = _clamp(span_ratio(end_date, units), 0.0, 100.0)
    visible = raw_end > 0 and left < 100
    if visible:
        # a minimum-width bar on the last day must still end inside the grid
        left = min(left, 100.0 - MIN_BAR_WIDTH)
    width = _clamp(raw_end - left, MIN_BAR_WIDTH, max(MIN_BAR_WIDTH, 100.0 - left))

    return {
        "left": left,
        "width": width,
        "visible": visible,
        "actual_start": start_date,
        "actual_end": end_date,
    }


def _unit_fraction(
    view_mode: ViewMode, unit: TimelineUnit, today: pendulum.Date
) -> float:
    if view_mode == ViewMode.WEEKLY:
        return sunday_weekday(today) / 7
    unit_days = days_between(unit["start"], unit["end"]) + 1
    return today.day / unit_days


def today_marker(
    view_mode: ViewMode, units: list[TimelineUnit], today: pendulum.Date
) -> TodayMarker:
    """
    Position of today in the same percentage space as task bars.

    Weekly and monthly views snap to the grid: the marker is placed inside the
    column holding today, at today's offset within that column. Daily and full
    views use the whole-span ratio.
    """
    if today < units[0]["start"] or today > units[-1]["end"]:
        return {"position": 0.0, "visible": False, "today": today}

    if view_mode in (ViewMode.WEEKLY, ViewMode.MONTHLY):
        unit_width = 100 / len(units)
        for index, unit in enumerate(units):
            if unit["start"] <= today <= unit["end"]:
                fraction = _unit_fraction(view_mode, unit, today)
                return {
                    "position": index * unit_width + fraction * unit_width,
                    "visible": True,
                    "today": today,
                }

    return {
        "position": _clamp(span_ratio(today, units), 0.0, 100.0),
        "visible": True,
        "today": today,
    }
