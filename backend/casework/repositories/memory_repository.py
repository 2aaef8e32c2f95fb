"""In-Memory Repository - EntityRepository over a lock-guarded dict.

Invariants:
    - Identifiers start at 1 and are handed out exactly once, even under concurrent saves
    - Identifiers are never reused after deletion
    - An explicit id at or above the counter moves the counter past it
    - Stored entities are copies: callers never alias repository state
    - Reads never observe a partially applied write

Design Decisions:
    - threading.Lock, not asyncio.Lock: critical sections never await, and the
      same instance stays safe if called from worker threads
    - Owned by the application (created in the lifespan, injected into services),
      never a module-level global
"""

import copy
import threading
from typing import Generic

from casework.core.entities import E


class InMemoryRepository(Generic[E]):
    """Process-local storage for one entity type."""

    def __init__(self):
        self._records: dict[int, E] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    async def save(self, entity: E) -> E:
        stored = copy.copy(entity)
        with self._lock:
            if stored.id is None:
                stored.id = self._next_id
                self._next_id += 1
            elif stored.id >= self._next_id:
                self._next_id = stored.id + 1
            self._records[stored.id] = stored
        return copy.copy(stored)

    async def find_by_id(self, entity_id: int) -> E | None:
        with self._lock:
            stored = self._records.get(entity_id)
        return copy.copy(stored) if stored is not None else None

    async def find_all(self) -> list[E]:
        with self._lock:
            snapshot = list(self._records.values())
        return [copy.copy(e) for e in snapshot]

    async def delete_by_id(self, entity_id: int) -> None:
        with self._lock:
            self._records.pop(entity_id, None)

    async def exists_by_id(self, entity_id: int) -> bool:
        with self._lock:
            return entity_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
