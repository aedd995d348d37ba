"""Core Layer: domain values, errors and boundary contracts. No IO, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
"""
