"""Task filter helpers."""

from collections.abc import Mapping
from typing import Iterable, List, Union
from models.task import Task


def _task_category(task: Union[Task, Mapping]):
    if isinstance(task, Mapping):
        return task.get("category")
    return getattr(task, "category", None)


def derive_filter_categories(tasks: Iterable[Union[Task, Mapping]]) -> List[str]:
    """Get the distinct category labels used by a list of tasks.

    Works from the task labels alone, so it includes custom categories and
    names that are no longer in the directory.

    Args:
        tasks: Task objects or mappings with an optional "category" key.

    Returns:
        Sorted list of distinct, non-empty category labels.
    """
    labels = (_task_category(task) for task in tasks or [])
    return sorted({label for label in labels if label})
