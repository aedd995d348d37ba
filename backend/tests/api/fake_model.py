"""Recording fake for the ToDoListModel protocol.

Keeps lists in a dict and records every call, so route tests can assert both
the HTTP outcome and whether the model was reached at all.
"""

from todolist.core.domain_types import ListName, ToDoList
from todolist.core.errors import (
    DatabaseError,
    ToDoListConflictError,
    ToDoListError,
    ToDoListNotFoundError,
)


class FakeToDoListModel:
    def __init__(self):
        self.lists: dict[str, int] = {}
        self.calls: list[tuple] = []
        self.fail_with: ToDoListError | None = None

    def _record(self, operation: str, *args: str) -> None:
        self.calls.append((operation, *args))
        if self.fail_with is not None:
            raise self.fail_with

    def _value(self, name: str) -> ToDoList:
        return ToDoList(name=ListName(name), task_number=self.lists[name])

    async def create_todo_list(self, name: str) -> ToDoList:
        self._record("create_todo_list", name)
        if name in self.lists:
            raise ToDoListConflictError(name)
        self.lists[name] = 0
        return self._value(name)

    async def delete_todo_list(self, name: str) -> ToDoList:
        self._record("delete_todo_list", name)
        if name not in self.lists:
            raise ToDoListNotFoundError(name)
        value = self._value(name)
        del self.lists[name]
        return value

    async def update_todo_list(self, old_name: str, new_name: str) -> ToDoList:
        self._record("update_todo_list", old_name, new_name)
        if old_name not in self.lists:
            raise ToDoListNotFoundError(old_name)
        if new_name != old_name and new_name in self.lists:
            raise ToDoListConflictError(new_name)
        self.lists[new_name] = self.lists.pop(old_name)
        return self._value(new_name)

    async def get_todo_list(self, name: str) -> ToDoList:
        self._record("get_todo_list", name)
        if name not in self.lists:
            raise ToDoListNotFoundError(name)
        return self._value(name)

    async def get_all_todo_lists(self) -> list[ToDoList]:
        self._record("get_all_todo_lists")
        return [self._value(name) for name in self.lists]


def storage_failure() -> DatabaseError:
    return DatabaseError("OperationalError", "get_all")
