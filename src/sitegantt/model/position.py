# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class TaskPosition(TypedDict):
    left: float
    width: float
    visible: bool
    actual_start: Optional[pendulum.Date]
    actual_end: Optional[pendulum.Date]


class TodayMarker(TypedDict):
    position: float
    visible: bool
    today: pendulum.Date
