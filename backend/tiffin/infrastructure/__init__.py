"""Infrastructure Layer — database sessions, repositories and logging.

Invariants:
    - Repositories are the only code that builds SQL statements
    - Repositories return frozen records from core/records.py, never ORM rows
"""
