"""Board logic: the category store and positional task mutation.

A task's id is its zero-based index inside its category *right now*. Ids are
not stable handles: every insert/remove shifts the ids of later tasks, so the
command layer re-resolves an id immediately before each operation.
"""
from datetime import date
import logging
from typing import Iterable, List, Optional, Tuple
from errors import DuplicateName, InvalidId, InvalidPosition, NotFound
from models import Task

DEFAULT_CATEGORIES: Tuple[str, ...] = ("Personal", "Work", "Family")

logger = logging.getLogger(__name__)


def _key(name: str) -> str:
    return name.casefold()


class Category:
    def __init__(self, name: str):
        self.name: str = name
        self._tasks: List[Task] = []

    # -------------------- queries --------------------
    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def is_valid_id(self, task_id: int) -> bool:
        return 0 <= task_id < len(self._tasks)

    def important_tasks(self) -> List[Task]:
        return [t for t in self._tasks if t.important]

    def _check_id(self, task_id: int) -> None:
        if not self.is_valid_id(task_id):
            raise InvalidId(task_id, len(self._tasks))

    # -------------------- task operations --------------------
    def add_task(self, description: str, due_date: date) -> int:
        """Append a new, unhighlighted task and return its id."""
        task_id = len(self._tasks)
        self._tasks.append(Task(description=description, due_date=due_date))
        logger.debug('Added task %d to "%s"', task_id, self.name)
        return task_id

    def remove_task(self, task_id: int) -> Task:
        self._check_id(task_id)
        task = self._tasks.pop(task_id)
        logger.debug('Removed task %d from "%s"', task_id, self.name)
        return task

    def move_priority(self, task_id: int, new_position: int) -> None:
        """Move a task to new_position.

        new_position is bounds-checked against the current length but applied
        to the list *after* the task has been taken out, so on [A, B, C]
        move_priority(0, 2) gives [B, C, A].
        """
        self._check_id(task_id)
        if not 0 <= new_position < len(self._tasks):
            raise InvalidPosition(new_position, len(self._tasks))
        task = self._tasks.pop(task_id)
        self._tasks.insert(new_position, task)
        logger.debug('Moved task %d to position %d in "%s"', task_id, new_position, self.name)

    def transfer_to(self, destination: 'Category', task_id: int) -> Task:
        """Take a task out of this category and append it to destination."""
        self._check_id(task_id)
        task = self._tasks.pop(task_id)
        destination._tasks.append(task)
        logger.debug('Transferred task %d from "%s" to "%s"', task_id, self.name, destination.name)
        return task

    def toggle_importance(self, task_id: int) -> bool:
        self._check_id(task_id)
        return self._tasks[task_id].toggle_importance()

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Category(name={self.name}, tasks={len(self._tasks)})"


class CategoryStore:
    def __init__(self, names: Iterable[str] = DEFAULT_CATEGORIES):
        self._categories: List[Category] = []
        for name in names:
            self.add_category(name)

    @property
    def categories(self) -> Tuple[Category, ...]:
        return tuple(self._categories)

    # -------------------- category operations --------------------
    def add_category(self, name: str) -> Category:
        if self.find_category(name) is not None:
            raise DuplicateName(name)
        category = Category(name)
        self._categories.append(category)
        logger.debug('Added category "%s"', name)
        return category

    def find_category(self, name: str) -> Optional[Category]:
        """Case-insensitive exact match; None when absent."""
        wanted = _key(name)
        for category in self._categories:
            if _key(category.name) == wanted:
                return category
        return None

    def get_category(self, name: str) -> Category:
        category = self.find_category(name)
        if category is None:
            raise NotFound(name)
        return category

    def delete_category(self, name: str) -> Category:
        """Remove a category together with all of its tasks."""
        category = self.get_category(name)
        self._categories.remove(category)
        logger.debug('Deleted category "%s" (%d tasks)', category.name, len(category))
        return category

    def __str__(self) -> str:
        return ', '.join(f'{c.name}: {len(c)} tasks' for c in self._categories)
