"""Infrastructure layer. IO adapters for database sessions, persistence and logging.

Invariants:
    - Every module here may do IO; core/ never imports from this package
"""
