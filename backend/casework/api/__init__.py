"""API Layer - FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (except 204 deletes)

Design Decisions:
    - Thin routes: boundary validation and status-code mapping only, lifecycle rules live in services/
"""
