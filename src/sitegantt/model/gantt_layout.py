# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from sitegantt.model.enhanced_task import EnhancedTask
from sitegantt.model.position import TodayMarker
from sitegantt.model.timeline_unit import TimelineUnit
from sitegantt.model.view_mode import ViewMode


class GanttLayout(TypedDict):
    today: pendulum.Date
    view_mode: ViewMode
    reference_period: pendulum.Date
    units: list[TimelineUnit]
    tasks: list[EnhancedTask]
    today_marker: TodayMarker


class GanttStats(TypedDict):
    total: int
    completed: int
    in_progress: int
    delayed: int
    avg_progress: int
