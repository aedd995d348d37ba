"""Pydantic Schemas: request/response contracts for the HTTP API.

Invariants:
    - Schemas validate at the system boundary; domain values live in core/
    - Wire field names are capitalized (Name, TaskNumber)
"""
