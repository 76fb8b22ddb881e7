"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, db/ or schemas/
    - All functions are pure and deterministic, except access key generation
      which draws from the OS random source
"""
