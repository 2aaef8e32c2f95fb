"""Entity Service - lifecycle operations shared by Case and Task.

Invariants:
    - create() sets created_date and updated_date to the same instant, then saves once
    - update_status() changes only status and updated_date; updated_date strictly increases
    - Missing identifiers yield None / False with no side effects
    - Repository errors propagate unchanged (no retry, no wrapping)
    - No validation of title/status here: input is checked at the HTTP boundary

Design Decisions:
    - One generic class instantiated per entity type instead of CaseService/TaskService copies
    - Clock injected so tests can pin or stall time
    - Concurrent update_status() calls on one id are last-writer-wins
"""

import copy
import logging
from typing import Generic

from casework.core.entities import E
from casework.core.repository_protocols import EntityRepository
from casework.core.timestamps import Clock, advance, utc_now

logger = logging.getLogger(__name__)


class EntityService(Generic[E]):
    """Create, read, status-update and delete entities of one type."""

    def __init__(
        self,
        repository: EntityRepository[E],
        entity_name: str,
        clock: Clock = utc_now,
    ):
        self._repository = repository
        self._entity_name = entity_name
        self._clock = clock

    @property
    def entity_name(self) -> str:
        return self._entity_name

    async def create(self, entity: E) -> E:
        """Stamp both timestamps and persist. Returns the entity with its new id."""
        now = self._clock()
        entity = copy.copy(entity)
        entity.created_date = now
        entity.updated_date = now
        saved = await self._repository.save(entity)
        logger.info(
            f"{self._entity_name} {saved.id} created",
            extra={"entity": self._entity_name, "entity_id": saved.id},
        )
        return saved

    async def get_by_id(self, entity_id: int) -> E | None:
        return await self._repository.find_by_id(entity_id)

    async def get_all(self) -> list[E]:
        return await self._repository.find_all()

    async def update_status(self, entity_id: int, status: str) -> E | None:
        """Replace status and refresh updated_date. None if the id is unknown."""
        entity = await self._repository.find_by_id(entity_id)
        if entity is None:
            logger.info(
                f"{self._entity_name} {entity_id} not found for status update",
                extra={"entity": self._entity_name, "entity_id": entity_id},
            )
            return None
        entity.status = status
        entity.updated_date = advance(entity.updated_date, self._clock())
        saved = await self._repository.save(entity)
        logger.info(
            f"{self._entity_name} {entity_id} status updated",
            extra={
                "entity": self._entity_name,
                "entity_id": entity_id,
                "status": status,
            },
        )
        return saved

    async def delete(self, entity_id: int) -> bool:
        """Remove the entity. False when nothing was stored under entity_id."""
        if not await self._repository.exists_by_id(entity_id):
            return False
        await self._repository.delete_by_id(entity_id)
        logger.info(
            f"{self._entity_name} {entity_id} deleted",
            extra={"entity": self._entity_name, "entity_id": entity_id},
        )
        return True
