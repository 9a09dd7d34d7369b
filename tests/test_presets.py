import pytest

from taskapi.models import Task
from taskapi.presets import FILTERS, SORTERS, apply_presets, filter_tasks, sort_tasks

UNSORTED = [
    Task(id=0, title="Task 0", priority=1, done=False),
    Task(id=1, title="Task 1", date=1426691590, priority=2, done=True),
    Task(id=2, title="Task 3", date=1426691592, priority=0, done=False),
    Task(id=3, title="Task 2", date=1426691591, priority=1, done=True),
]


@pytest.mark.parametrize(
    "name, expected_ids",
    [
        ("isDone", [1, 3]),
        ("isNotDone", [0, 2]),
        ("isScheduled", [1, 2, 3]),
    ],
)
def test_filters(name, expected_ids):
    assert [t.id for t in filter_tasks(UNSORTED, FILTERS[name])] == expected_ids


@pytest.mark.parametrize(
    "name, expected_ids",
    [
        ("dateAsc", [0, 1, 3, 2]),
        ("dateDesc", [2, 3, 1, 0]),
        # Tasks 0 and 3 share priority 1 and keep their original order.
        ("priorityAsc", [2, 0, 3, 1]),
        ("priorityDesc", [1, 0, 3, 2]),
    ],
)
def test_sorters(name, expected_ids):
    preset = SORTERS[name]
    assert [t.id for t in sort_tasks(UNSORTED, preset.key, preset.descending)] == expected_ids


def test_presets_do_not_mutate_input():
    data = list(UNSORTED)
    filter_tasks(data, FILTERS["isDone"])
    sort_tasks(data, SORTERS["dateDesc"].key, descending=True)
    assert data == UNSORTED


def test_apply_presets_filters_then_sorts():
    result = apply_presets(UNSORTED, "isDone", "dateDesc")
    assert [t.id for t in result] == [3, 1]


def test_apply_presets_ignores_unknown_names():
    assert apply_presets(UNSORTED, "bogus", "alsoBogus") == UNSORTED
    assert apply_presets(UNSORTED) == UNSORTED
