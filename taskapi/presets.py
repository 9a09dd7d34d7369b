"""Named filter and sort presets for task listings.

Filters and sorts are pure functions: they return new lists and never touch
their input. Sorting relies on `sorted`, which is stable in both directions,
so tasks with equal keys keep their relative order.
"""
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from .models import Task

Predicate = Callable[[Task], bool]
KeyFunc = Callable[[Task], Any]


class SortPreset(NamedTuple):
    key: KeyFunc
    descending: bool = False


def filter_tasks(tasks: List[Task], predicate: Predicate) -> List[Task]:
    return [task for task in tasks if predicate(task)]


def sort_tasks(tasks: List[Task], key: KeyFunc, descending: bool = False) -> List[Task]:
    return sorted(tasks, key=key, reverse=descending)


FILTERS: Dict[str, Predicate] = {
    "isDone": lambda t: t.done,
    "isNotDone": lambda t: not t.done,
    "isScheduled": lambda t: t.date != 0,
}

SORTERS: Dict[str, SortPreset] = {
    "dateAsc": SortPreset(lambda t: t.date),
    "dateDesc": SortPreset(lambda t: t.date, descending=True),
    "priorityAsc": SortPreset(lambda t: t.priority),
    "priorityDesc": SortPreset(lambda t: t.priority, descending=True),
}


def apply_presets(
    tasks: List[Task],
    filter_name: Optional[str] = None,
    sort_name: Optional[str] = None,
) -> List[Task]:
    """Apply the named filter, then the named sort.

    Unknown names are ignored rather than treated as errors.
    """
    predicate = FILTERS.get(filter_name or "")
    if predicate is not None:
        tasks = filter_tasks(tasks, predicate)

    preset = SORTERS.get(sort_name or "")
    if preset is not None:
        tasks = sort_tasks(tasks, preset.key, preset.descending)

    return tasks
