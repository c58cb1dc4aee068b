"""Tests for task bar placement and the today marker."""

import pendulum
import pytest

from sitegantt.model.view_mode import ViewMode
from sitegantt.service.position import MIN_BAR_WIDTH, position_task, today_marker
from sitegantt.service.timeline import generate_timeline_units, month_unit

JANUARY = [month_unit(pendulum.date(2024, 1, 1), "MMM")]


# === Task bars ===


def test_position_within_single_month():
    position = position_task(
        pendulum.date(2024, 1, 10), pendulum.date(2024, 1, 15), JANUARY
    )
    assert position["visible"] is True
    assert position["left"] == pytest.approx(30.0)
    assert position["width"] == pytest.approx(16.67, abs=0.01)
    assert position["actual_start"] == pendulum.date(2024, 1, 10)
    assert position["actual_end"] == pendulum.date(2024, 1, 15)


@pytest.mark.parametrize(
    "start, end",
    [(None, pendulum.date(2024, 1, 15)), (pendulum.date(2024, 1, 10), None), (None, None)],
)
def test_position_without_dates_is_hidden(start, end):
    position = position_task(start, end, JANUARY)
    assert position["visible"] is False
    assert position["left"] == 0
    assert position["width"] == 0
    assert position["actual_start"] == start
    assert position["actual_end"] == end


def test_position_before_timeline_is_hidden():
    position = position_task(
        pendulum.date(2023, 12, 1), pendulum.date(2023, 12, 10), JANUARY
    )
    assert position["visible"] is False


def test_position_after_timeline_is_hidden():
    position = position_task(
        pendulum.date(2024, 2, 5), pendulum.date(2024, 2, 10), JANUARY
    )
    assert position["visible"] is False


def test_position_clipped_at_timeline_start():
    position = position_task(
        pendulum.date(2023, 12, 25), pendulum.date(2024, 1, 16), JANUARY
    )
    assert position["visible"] is True
    assert position["left"] == 0
    assert position["width"] == pytest.approx(50.0)


def test_same_day_task_keeps_minimum_width():
    position = position_task(
        pendulum.date(2024, 1, 10), pendulum.date(2024, 1, 10), JANUARY
    )
    assert position["visible"] is True
    assert position["width"] == pytest.approx(1.0)


@pytest.mark.parametrize(
    "start, end",
    [
        (pendulum.date(2023, 6, 1), pendulum.date(2025, 6, 1)),
        (pendulum.date(2024, 1, 30), pendulum.date(2024, 1, 30)),
        (pendulum.date(2024, 1, 1), pendulum.date(2024, 1, 31)),
        (pendulum.date(2024, 1, 20), pendulum.date(2024, 3, 1)),
        (pendulum.date(2024, 1, 5), pendulum.date(2024, 1, 2)),
    ],
)
def test_position_bounds(start, end):
    position = position_task(start, end, JANUARY)
    assert 0 <= position["left"] <= 100
    if position["visible"]:
        assert MIN_BAR_WIDTH <= position["width"] <= 100 - position["left"]


# === Today marker ===


def test_today_marker_daily_uses_span_ratio():
    today = pendulum.date(2024, 3, 15)
    units = generate_timeline_units(ViewMode.DAILY, today, today)
    marker = today_marker(ViewMode.DAILY, units, today)
    assert marker["visible"] is True
    assert marker["position"] == pytest.approx(7 / 13 * 100)
    assert marker["today"] == today


def test_today_marker_weekly_snaps_to_week_column():
    today = pendulum.date(2024, 3, 15)
    units = generate_timeline_units(ViewMode.WEEKLY, today, today)
    marker = today_marker(ViewMode.WEEKLY, units, today)
    # Friday of the third of six weeks
    assert marker["position"] == pytest.approx((2 + 5 / 7) * 100 / 6)


def test_today_marker_monthly_snaps_to_month_column():
    today = pendulum.date(2024, 3, 15)
    units = generate_timeline_units(ViewMode.MONTHLY, today, today)
    marker = today_marker(ViewMode.MONTHLY, units, today)
    assert marker["position"] == pytest.approx((2 + 15 / 31) * 100 / 6)


def test_today_marker_outside_timeline_is_hidden():
    reference = pendulum.date(2024, 3, 15)
    units = generate_timeline_units(ViewMode.MONTHLY, reference, reference)
    marker = today_marker(ViewMode.MONTHLY, units, pendulum.date(2024, 8, 1))
    assert marker["visible"] is False


def test_today_marker_monthly_reaches_column_edge_on_last_day():
    reference = pendulum.date(2024, 3, 15)
    units = generate_timeline_units(ViewMode.MONTHLY, reference, reference)

    last_day = today_marker(ViewMode.MONTHLY, units, pendulum.date(2024, 3, 31))
    first_day = today_marker(ViewMode.MONTHLY, units, pendulum.date(2024, 3, 1))

    assert last_day["position"] == pytest.approx(50.0)
    assert first_day["position"] == pytest.approx((2 + 1 / 31) * 100 / 6)
