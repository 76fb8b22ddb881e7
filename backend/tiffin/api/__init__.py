"""API Layer — FastAPI routes, envelope-to-response mapping and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes parse raw inputs and delegate to services; no business logic here
"""
