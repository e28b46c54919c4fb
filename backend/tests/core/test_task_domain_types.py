"""Domain Types — Task defaults and TaskId wrapper."""

from task_manager.core.domain_types import Task, TaskId


def test_task_id_wraps_int():
    assert TaskId(7) == 7


def test_new_task_has_no_identity_or_timestamps():
    task = Task(name="buy milk")
    assert task.id is None
    assert task.completed is False
    assert task.created_at is None
    assert task.updated_at is None


def test_tasks_compare_by_value():
    assert Task(name="a", id=TaskId(1)) == Task(name="a", id=TaskId(1))
    assert Task(name="a", id=TaskId(1)) != Task(name="a", id=TaskId(2))
