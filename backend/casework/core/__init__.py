"""Core Layer - entity types, storage contracts, error hierarchy. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, repositories/ or db/
    - Functions here are pure and deterministic (the clock is passed in)
"""
