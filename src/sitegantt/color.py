# SPDX-License-Identifier: MIT

from typing import Optional

from sitegantt.model.status import EffectiveStatus

TODAY_MARKER_COLOR = "bright_red"
GRID_COLOR = "grey35"
TASK_KEY_COLOR = "plum1"

_STATUS_COLORS: dict[EffectiveStatus, str] = {
    EffectiveStatus.COMPLETED: "green",
    EffectiveStatus.IN_PROGRESS: "dark_orange",
    EffectiveStatus.PLANNING: "blue",
    EffectiveStatus.ON_HOLD: "yellow",
    EffectiveStatus.DELAYED: "red",
}


def status_color(status: Optional[EffectiveStatus]) -> str:
    if status is None:
        return "bright_black"
    return _STATUS_COLORS[status]
