"""Recoverable errors raised by the category store.

None of these is fatal: the command loop reports them on one line and keeps
going. A rejected operation never leaves a partial mutation behind.
"""


class OrganizerError(Exception):
    """Base class for store errors."""
    pass


class DuplicateName(OrganizerError):
    """Raised when a category name collides (case-insensitively)."""

    def __init__(self, name: str):
        super().__init__(f'Category "{name}" already exists.')
        self.name = name


class NotFound(OrganizerError):
    """Raised when no category matches a name."""

    def __init__(self, name: str):
        super().__init__(f'Category "{name}" not found.')
        self.name = name


class InvalidId(OrganizerError):
    """Raised when a task id is outside [0, length)."""

    def __init__(self, task_id: int, length: int):
        super().__init__(f'Invalid task id {task_id} (valid: 0..{length - 1}).' if length
                         else f'Invalid task id {task_id} (category is empty).')
        self.task_id = task_id
        self.length = length


class InvalidPosition(OrganizerError):
    """Raised when a priority move targets a position outside [0, length)."""

    def __init__(self, position: int, length: int):
        super().__init__(f'Invalid position {position} (valid: 0..{length - 1}).')
        self.position = position
        self.length = length
