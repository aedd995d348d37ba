"""Boundary Protocols: contract between the HTTP handlers and the model layer.

Invariants:
    - Handlers depend on ToDoListModel only, never on an ORM implementation
    - Every method either returns a populated value or raises ToDoListError
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from todolist.core.domain_types import ToDoList


class ToDoListModel(Protocol):
    """Contract for ToDo list persistence: implemented by the shell."""
    async def create_todo_list(self, name: str) -> ToDoList: ...
    async def delete_todo_list(self, name: str) -> ToDoList: ...
    async def update_todo_list(self, old_name: str, new_name: str) -> ToDoList: ...
    async def get_todo_list(self, name: str) -> ToDoList: ...
    async def get_all_todo_lists(self) -> list[ToDoList]: ...
