"""Domain Types: the ToDo list value passed between the model layer and the API.

Invariants:
    - ToDoList is immutable; the model layer builds a fresh value per call
    - task_number is derived (count of tasks) and never written through this type
"""

from dataclasses import dataclass
from typing import NewType

ListName = NewType("ListName", str)


@dataclass(frozen=True)
class ToDoList:
    """A named collection of tasks, as seen from outside the persistence layer."""
    name: ListName
    task_number: int = 0
