"""Command-line menu loop for the task organizer.

Reads a numbered menu choice, prompts for the arguments of that command,
parses them into typed values and calls exactly one store operation. The grid
is redrawn only after a command actually changed something.
"""
import logging
import os
from datetime import date
from enum import IntEnum
from typing import Callable, Dict, List, Optional
from board import Category, CategoryStore
from errors import DuplicateName, InvalidId, InvalidPosition, NotFound, OrganizerError
from grid import ID_WIDTH, Grid, render
from theme import color, BOLD, HEADER_COLOR, ID_COLOR, IMPORTANT_COLOR, RULE_COLOR

logger = logging.getLogger(__name__)

# --- terminal control helpers ---
# ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home)
def _clear_screen() -> None:
    print("\033[3J\033[H\033[2J\033[H", end="", flush=True)


def _truthy_env(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def _enter_alt_screen() -> None:
    print("\033[?1049h", end="", flush=True)


def _leave_alt_screen() -> None:
    print("\033[?1049l", end="", flush=True)


class Action(IntEnum):
    ADD_TASK = 1
    DELETE_TASK = 2
    MOVE_TASK_PRIORITY = 3
    MOVE_TASK_TO_CATEGORY = 4
    HIGHLIGHT_TASK = 5
    ADD_CATEGORY = 6
    DELETE_CATEGORY = 7
    EXIT = 8


MENU_LABELS: Dict[Action, str] = {
    Action.ADD_TASK: "Add task",
    Action.DELETE_TASK: "Delete task",
    Action.MOVE_TASK_PRIORITY: "Move task priority",
    Action.MOVE_TASK_TO_CATEGORY: "Move task to different category",
    Action.HIGHLIGHT_TASK: "Highlight task",
    Action.ADD_CATEGORY: "Add category",
    Action.DELETE_CATEGORY: "Delete category",
    Action.EXIT: "Exit",
}

ERROR_MESSAGES = {
    DuplicateName: "Category already exists.",
    NotFound: "Category not found.",
    InvalidId: "Invalid task ID.",
    InvalidPosition: "Invalid new position.",
}


def error_message(exc: OrganizerError) -> str:
    return ERROR_MESSAGES.get(type(exc), str(exc))


# -------------------- input parsing --------------------
def parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_date(raw: str) -> Optional[date]:
    """Parse YYYY-MM-DD; None when the text is not a valid date."""
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        return None


# -------------------- presentation --------------------
def grid_lines(grid: Grid) -> List[str]:
    """Lay out a rendered grid as terminal lines, painting highlighted cells."""
    rule_width = sum(len(h) + 1 for h in grid.header) + ID_WIDTH + 1
    lines = [' ' * 12 + color('CATEGORIES', HEADER_COLOR, BOLD),
             ' ' * 10 + color('-' * rule_width, RULE_COLOR)]
    header = color('ID'.ljust(ID_WIDTH), ID_COLOR) + '|'
    header += ''.join(color(h, HEADER_COLOR, BOLD) + '|' for h in grid.header)
    lines.append(header)
    for label, row in zip(grid.labels, grid.body):
        line = color(label, ID_COLOR) + '|'
        for cell in row:
            text = color(cell.text, IMPORTANT_COLOR) if cell.highlight else cell.text
            line += text + '|'
        lines.append(line)
    return lines


class CLI:
    def __init__(self, store: CategoryStore):
        self.store: CategoryStore = store
        # Alt screen default ON; disable with ORGANIZER_ALT_SCREEN=0 (or false/no/off)
        self.alt_screen: bool = _truthy_env(os.getenv("ORGANIZER_ALT_SCREEN"), True)
        self.needs_redraw: bool = True
        self.message: Optional[str] = None
        self._handlers: Dict[Action, Callable[[], None]] = {
            Action.ADD_TASK: self._add_task,
            Action.DELETE_TASK: self._delete_task,
            Action.MOVE_TASK_PRIORITY: self._move_priority,
            Action.MOVE_TASK_TO_CATEGORY: self._move_task,
            Action.HIGHLIGHT_TASK: self._highlight_task,
            Action.ADD_CATEGORY: self._add_category,
            Action.DELETE_CATEGORY: self._delete_category,
        }

    def run(self) -> None:
        """Main REPL loop.

        The grid is cleared and redrawn only when the previous command
        changed the store; the last command's message is printed below it.
        """
        exit_message: Optional[str] = None
        if self.alt_screen:
            _enter_alt_screen()
        try:
            while True:
                self.refresh()
                self._menu()
                if not self.handle_choice(input("Please enter your choice: ")):
                    exit_message = "Goodbye."
                    break
        except (KeyboardInterrupt, EOFError):
            exit_message = "Interrupted. Goodbye."
        finally:
            if self.alt_screen:
                _leave_alt_screen()
            if exit_message:
                print(exit_message)

    def refresh(self) -> None:
        if self.needs_redraw:
            _clear_screen()
            for line in grid_lines(render(self.store.categories)):
                print(line)
            self.needs_redraw = False
        if self.message:
            print(f"\n{self.message}")
            self.message = None

    def _menu(self) -> None:
        print("\nMenu:")
        for action in Action:
            print(f"{action.value}. {MENU_LABELS[action]}")
        print("(Task IDs are row numbers; they shift when a task above is removed or moved.)")

    # -------------------- command dispatch --------------------
    def handle_choice(self, raw: str) -> bool:
        """Run one menu command. Returns False when the user chose Exit."""
        number = parse_int(raw)
        if number is None:
            self._fail("Invalid input. Please try again.")
            return True
        try:
            action = Action(number)
        except ValueError:
            self._fail("Invalid option. Please try again.")
            return True
        if action is Action.EXIT:
            return False
        logger.info("Command: %s", action.name)
        self._handlers[action]()
        return True

    def _fail(self, message: str) -> None:
        logger.info("Rejected: %s", message)
        self.message = message

    def _changed(self, message: str) -> None:
        self.message = message
        self.needs_redraw = True

    def _apply(self, operation: Callable[[], object], success: str) -> None:
        try:
            operation()
        except OrganizerError as exc:
            self._fail(error_message(exc))
            return
        self._changed(success)

    # ---- prompts ----
    def _prompt(self, text: str) -> str:
        return input(text).strip()

    def _prompt_category(self, label: str = "category") -> Optional[Category]:
        name = self._prompt(f"Enter {label} name: ")
        category = self.store.find_category(name)
        if category is None:
            self._fail(f"{label.capitalize()} not found.")
        return category

    def _prompt_task_id(self, category: Category, text: str) -> Optional[int]:
        task_id = parse_int(self._prompt(text))
        if task_id is None or not category.is_valid_id(task_id):
            self._fail("Invalid task ID.")
            return None
        return task_id

    # ---- individual command handlers ----
    def _add_task(self) -> None:
        category = self._prompt_category()
        if category is None:
            return
        description = self._prompt("Enter task description (max 30 characters): ")
        due_date = parse_date(self._prompt("Enter due date (yyyy-mm-dd): "))
        if due_date is None:
            self._fail("Invalid date format.")
            return
        self._apply(lambda: category.add_task(description, due_date), "Task added successfully.")

    def _delete_task(self) -> None:
        category = self._prompt_category()
        if category is None:
            return
        task_id = self._prompt_task_id(category, "Enter task ID to delete: ")
        if task_id is None:
            return
        self._apply(lambda: category.remove_task(task_id), "Task deleted successfully.")

    def _move_priority(self) -> None:
        category = self._prompt_category()
        if category is None:
            return
        task_id = self._prompt_task_id(category, "Enter current task ID: ")
        if task_id is None:
            return
        position = parse_int(self._prompt("Enter new priority position: "))
        if position is None:
            self._fail("Invalid new position.")
            return
        self._apply(lambda: category.move_priority(task_id, position),
                    "Task priority updated successfully.")

    def _move_task(self) -> None:
        source = self._prompt_category("source")
        if source is None:
            return
        task_id = self._prompt_task_id(source, "Enter task ID to move: ")
        if task_id is None:
            return
        destination = self._prompt_category("destination")
        if destination is None:
            return
        self._apply(lambda: source.transfer_to(destination, task_id), "Task moved successfully.")

    def _highlight_task(self) -> None:
        category = self._prompt_category()
        if category is None:
            return
        task_id = self._prompt_task_id(category, "Enter task ID to highlight: ")
        if task_id is None:
            return
        self._apply(lambda: category.toggle_importance(task_id), "Task highlight status changed.")

    def _add_category(self) -> None:
        name = self._prompt("Enter new category name: ")
        if not name:
            self._fail("Category name required.")
            return
        self._apply(lambda: self.store.add_category(name), "Category added successfully.")

    def _delete_category(self) -> None:
        category = self._prompt_category()
        if category is None:
            return
        self._apply(lambda: self.store.delete_category(category.name),
                    "Category and its tasks deleted successfully.")


if __name__ == '__main__':  # pragma: no cover
    CLI(CategoryStore()).run()
