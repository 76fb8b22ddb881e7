"""Tiffin Backend — customers, orders and payments for a meal subscription service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
