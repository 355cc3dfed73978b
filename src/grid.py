"""Grid projection of the category store.

render() turns the ordered categories into a header row plus a rectangular
body of (text, highlight) cells. It writes nothing to the terminal; painting
highlighted cells is left to the caller (see cli.grid_lines).
"""
from dataclasses import dataclass
from datetime import date
from typing import List, NamedTuple, Sequence
from board import Category
from models import Task

ID_WIDTH = 5
COLUMN_WIDTH = 40


class Cell(NamedTuple):
    text: str
    highlight: bool = False


@dataclass(frozen=True)
class Grid:
    header: List[str]
    labels: List[str]
    body: List[List[Cell]]

    @property
    def max_rows(self) -> int:
        return len(self.body)


def fit(text: str, width: int) -> str:
    """Left-justify text to width, then clip anything beyond it."""
    return text.ljust(width)[:width]


def short_date(day: date) -> str:
    return f"{day.month}/{day.day}/{day.year}"


def task_text(task: Task) -> str:
    return f"{task.description} (Due: {short_date(task.due_date)})"


def render(categories: Sequence[Category], column_width: int = COLUMN_WIDTH,
           id_width: int = ID_WIDTH) -> Grid:
    header = [fit(c.name, column_width) for c in categories]
    # default=0 keeps an empty store (or all-empty categories) at zero rows
    rows = max((len(c) for c in categories), default=0)
    columns = [c.tasks for c in categories]
    blank = Cell(' ' * column_width, False)
    labels: List[str] = []
    body: List[List[Cell]] = []
    for r in range(rows):
        labels.append(str(r).ljust(id_width))
        row_cells: List[Cell] = []
        for tasks in columns:
            if r < len(tasks):
                task = tasks[r]
                row_cells.append(Cell(fit(task_text(task), column_width), task.important))
            else:
                row_cells.append(blank)
        body.append(row_cells)
    return Grid(header=header, labels=labels, body=body)
