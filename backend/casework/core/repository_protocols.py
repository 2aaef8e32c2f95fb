"""Boundary Protocols - storage contract between the service layer and its backends.

Invariants:
    - Services NEVER import a concrete repository; they receive an EntityRepository
    - Missing identifiers are a normal outcome: None / False / no-op, never an exception
    - Identifiers start at 1, increase monotonically and are never reused after deletion
    - Storage failures surface as DatabaseError and are not caught by callers in core/services

Design Decisions:
    - Protocol over ABC: structural subtyping, SQL and in-memory backends share no base class
    - Async in Protocol: the SQL backend does IO; the in-memory backend matches the signatures
"""

from typing import Protocol

from casework.core.entities import E


class EntityRepository(Protocol[E]):
    """Contract for per-entity persistence - implemented in repositories/."""

    async def save(self, entity: E) -> E:
        """Assign the next id if entity.id is None, else overwrite; return the stored entity."""
        ...

    async def find_by_id(self, entity_id: int) -> E | None: ...

    async def find_all(self) -> list[E]: ...

    async def delete_by_id(self, entity_id: int) -> None: ...

    async def exists_by_id(self, entity_id: int) -> bool: ...
