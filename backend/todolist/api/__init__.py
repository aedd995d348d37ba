"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes never touch the ORM directly; they call the ToDoListModel protocol
"""
