"""Tests for sequential task keys."""

import pytest

from sitegantt.model.task_key_scope import TaskKeyScope
from sitegantt.service.task_key import alpha_key, assign_task_keys, sort_by_creation


@pytest.mark.parametrize(
    "index, expected",
    [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"), (701, "ZZ"), (702, "AAA")],
)
def test_alpha_key(index, expected):
    assert alpha_key(index) == expected


def test_alpha_key_rejects_negative_index():
    with pytest.raises(ValueError):
        alpha_key(-1)


def test_keys_follow_creation_order_not_input_order(make_task):
    tasks = [
        make_task("t3", created_at="2024-01-03T00:00:00Z"),
        make_task("t1", created_at="2024-01-01T00:00:00Z"),
        make_task("t2", created_at="2024-01-02T00:00:00Z"),
    ]
    assert assign_task_keys(tasks) == {"t1": "A", "t2": "B", "t3": "C"}
    assert assign_task_keys(list(reversed(tasks))) == {"t1": "A", "t2": "B", "t3": "C"}


def test_keys_restart_per_project(make_task):
    tasks = [
        make_task("a1", project_id="p1", created_at="2024-01-01T00:00:00Z"),
        make_task("b1", project_id="p2", created_at="2024-01-02T00:00:00Z"),
        make_task("a2", project_id="p1", created_at="2024-01-03T00:00:00Z"),
        make_task("loose", project_id=None, created_at="2024-01-04T00:00:00Z"),
    ]
    assert assign_task_keys(tasks, TaskKeyScope.PROJECT) == {
        "a1": "A",
        "a2": "B",
        "b1": "A",
        "loose": "A",
    }


def test_global_keys_run_across_projects(make_task):
    tasks = [
        make_task("a1", project_id="p1", created_at="2024-01-01T00:00:00Z"),
        make_task("b1", project_id="p2", created_at="2024-01-02T00:00:00Z"),
        make_task("a2", project_id="p1", created_at="2024-01-03T00:00:00Z"),
    ]
    assert assign_task_keys(tasks, TaskKeyScope.GLOBAL) == {
        "a1": "A",
        "b1": "B",
        "a2": "C",
    }


def test_tasks_without_creation_time_go_last_in_input_order(make_task):
    tasks = [
        make_task("x", created_at=None),
        make_task("late", created_at="2024-02-01T00:00:00Z"),
        make_task("y", created_at=None),
        make_task("early", created_at="2024-01-01T00:00:00Z"),
    ]
    assert [task["id"] for task in sort_by_creation(tasks)] == ["early", "late", "x", "y"]


def test_keys_continue_past_z(make_task):
    tasks = [
        make_task(f"t{n:02d}", created_at=f"2024-01-{n + 1:02d}T00:00:00Z")
        for n in range(28)
    ]
    keys = assign_task_keys(tasks)
    assert keys["t25"] == "Z"
    assert keys["t26"] == "AA"
    assert keys["t27"] == "AB"


def test_unparseable_creation_time_is_rejected(make_task):
    tasks = [make_task("t1", created_at="10:00"), make_task("t2")]
    with pytest.raises(ValueError):
        assign_task_keys(tasks)
