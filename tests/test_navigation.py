"""Tests for period navigation and timeline titles."""

import pendulum
import pytest

from sitegantt.model.view_mode import ViewMode
from sitegantt.service.navigation import navigate_period, timeline_title

PERIOD = pendulum.date(2024, 3, 15)


@pytest.mark.parametrize(
    "direction, view_mode, expected",
    [
        ("next", ViewMode.DAILY, pendulum.date(2024, 3, 16)),
        ("prev", ViewMode.DAILY, pendulum.date(2024, 3, 14)),
        ("next", ViewMode.WEEKLY, pendulum.date(2024, 4, 15)),
        ("prev", ViewMode.MONTHLY, pendulum.date(2024, 2, 15)),
        ("next", ViewMode.FULL, PERIOD),
    ],
)
def test_navigate_period(direction, view_mode, expected):
    assert navigate_period(direction, view_mode, PERIOD) == expected


def test_navigate_period_clamps_month_end():
    assert navigate_period(
        "prev", ViewMode.MONTHLY, pendulum.date(2024, 3, 31)
    ) == pendulum.date(2024, 2, 29)


@pytest.mark.parametrize(
    "view_mode, expected",
    [
        (ViewMode.DAILY, "Daily - Mar 15"),
        (ViewMode.WEEKLY, "Weekly - March 2024"),
        (ViewMode.MONTHLY, "Monthly - March 2024"),
        (ViewMode.FULL, "Full Timeline"),
    ],
)
def test_timeline_title(view_mode, expected):
    assert timeline_title(view_mode, PERIOD) == expected


def test_timeline_title_for_project():
    assert timeline_title(ViewMode.DAILY, PERIOD, "Harbour Tower") == "Harbour Tower Timeline"
