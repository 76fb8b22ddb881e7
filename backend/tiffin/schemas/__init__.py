"""Pydantic Schemas — request validation for every service operation.

Invariants:
    - Schemas are module-level classes, built once at import and never mutated
    - Public field names are camelCase (aliases); Python attributes are snake_case
    - Schemas never touch the database
"""
