"""Data models for the terminal task organizer.

Currently only exposes the Task dataclass. A task has no id of its own: it
is addressed by its position inside the owning category (see board.py).
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

MAX_DESCRIPTION = 30


def truncate_description(text: str) -> str:
    """Clip a description to MAX_DESCRIPTION characters."""
    return text[:MAX_DESCRIPTION]


@dataclass
class Task:
    """A single task cell.

    Fields:
        description: Short, single-line text, never longer than 30 characters.
            Longer values are clipped on every assignment, not only here.
        due_date: Calendar date; datetimes are reduced to their date part.
        important: Highlight flag, flipped by toggle_importance().
    """
    description: str
    due_date: date
    important: bool = False

    def __setattr__(self, name: str, value: Any) -> None:
        if name == 'description':
            value = truncate_description(str(value))
        elif name == 'due_date' and isinstance(value, datetime):
            value = value.date()
        super().__setattr__(name, value)

    def toggle_importance(self) -> bool:
        self.important = not self.important
        return self.important

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(description={self.description}, due={self.due_date}, important={self.important})"
