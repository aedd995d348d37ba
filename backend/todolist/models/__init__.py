"""ORM Models: SQLAlchemy declarative models for ToDo lists and their tasks.

Invariants:
    - All models inherit from Base (db/base.py)
    - ToDoListRecord is the aggregate root; tasks are scoped by list_id

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all
"""

from todolist.models.todo_list import ToDoListRecord  # noqa: F401
from todolist.models.task import Task  # noqa: F401
