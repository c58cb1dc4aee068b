# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class TimelineUnit(TypedDict):
    """
    One column of the rendered grid.

    Both `start` and `end` are inclusive calendar dates. `is_aggregate` marks a
    unit spanning a whole quarter rather than a single day, week or month.
    """

    label: str
    start: pendulum.Date
    end: pendulum.Date
    year: int
    quarter: int
    is_aggregate: bool


class DateExtents(TypedDict):
    start: pendulum.Date
    end: pendulum.Date
