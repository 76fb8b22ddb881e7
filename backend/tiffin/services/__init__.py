"""Service Layer — validate, query or mutate the store, map to an envelope.

Invariants:
    - Every public service method returns an Envelope and never raises
    - Services hold no state between calls beyond their repositories and defaults
"""
