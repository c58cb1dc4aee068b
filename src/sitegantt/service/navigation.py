# SPDX-License-Identifier: MIT

from typing import Literal, Optional

import pendulum

from sitegantt.model.view_mode import ViewMode

Direction = Literal["prev", "next"]


def navigate_period(
    direction: Direction, view_mode: ViewMode, period: pendulum.Date
) -> pendulum.Date:
    """
    Step the reference period one view-sized move back or forward.

    Daily moves a day; weekly and monthly move a month, since the weekly grid
    is built from the reference month. The full view has nothing to navigate.
    """
    step = 1 if direction == "next" else -1
    match view_mode:
        case ViewMode.DAILY:
            return period.add(days=step)
        case ViewMode.WEEKLY | ViewMode.MONTHLY:
            return period.add(months=step)
    return period


def timeline_title(
    view_mode: ViewMode,
    period: pendulum.Date,
    project_name: Optional[str] = None,
) -> str:
    if project_name is not None:
        return f"{project_name} Timeline"

    match view_mode:
        case ViewMode.DAILY:
            return f"Daily - {period.format('MMM D')}"
        case ViewMode.WEEKLY:
            return f"Weekly - {period.format('MMMM YYYY')}"
        case ViewMode.MONTHLY:
            return f"Monthly - {period.format('MMMM YYYY')}"
    return "Full Timeline"
