"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (title and status non-blank)
    - Wire format is camelCase; Python attributes are snake_case

Design Decisions:
    - Separate from entities and models: schemas are API contracts, models are persistence
"""
