"""SQL Repository - EntityRepository over SQLAlchemy's async ORM.

Invariants:
    - One repository per entity type, bound to a request-scoped AsyncSession
    - Every mutating call commits exactly once
    - SQLAlchemy failures roll back and leave as DatabaseError (never swallowed)
    - Returned values are core.entities dataclasses, never ORM rows
    - Datetimes are written and read back as UTC-aware values

Design Decisions:
    - Entity dataclass fields and ORM column names are identical, so one generic
      mapper serves Case/CaseRecord and Task/TaskRecord
    - save() with an id uses session.merge(): overwrite-or-insert at that identifier;
      on PostgreSQL the id sequence is then moved past it so later inserts never collide
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import asdict, fields
from datetime import datetime
from typing import AsyncGenerator, Generic

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from casework.core.entities import E, Case, Task
from casework.core.timestamps import as_utc
from casework.db.base import Base
from casework.infrastructure.database import to_database_error
from casework.models.case import CaseRecord
from casework.models.task import TaskRecord

logger = logging.getLogger(__name__)


class SqlEntityRepository(Generic[E]):
    """Stores one entity type in its table."""

    def __init__(
        self,
        db: AsyncSession,
        entity_cls: type[E],
        record_cls: type[Base],
    ):
        self._db = db
        self._entity_cls = entity_cls
        self._record_cls = record_cls
        self._field_names = [f.name for f in fields(entity_cls)]

    # ─── Mapping ─────────────────────────────────────────────────

    def _to_record(self, entity: E) -> Base:
        values = {
            name: as_utc(value) if isinstance(value, datetime) else value
            for name, value in asdict(entity).items()
        }
        return self._record_cls(**values)

    def _to_entity(self, record: Base) -> E:
        values = {}
        for name in self._field_names:
            value = getattr(record, name)
            if isinstance(value, datetime):
                value = as_utc(value)
            values[name] = value
        return self._entity_cls(**values)

    @asynccontextmanager
    async def _storage(self, operation: str) -> AsyncGenerator[None, None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"{self._entity_cls.__name__} {operation} failed: {e}",
                extra={"entity": self._entity_cls.__name__, "operation": operation},
            )
            raise to_database_error(e) from e

    async def _advance_sequence(self, entity_id: int) -> None:
        """Keep the PostgreSQL id sequence at or past an explicitly saved id.

        SQLite AUTOINCREMENT tracks explicit ids in sqlite_sequence on its own.
        """
        if self._db.get_bind().dialect.name != "postgresql":
            return
        await self._db.execute(
            text(
                "SELECT setval(s.seq, GREATEST(:id, "
                "COALESCE(pg_sequence_last_value(s.seq), 0))) "
                "FROM (SELECT pg_get_serial_sequence(:table, 'id')::regclass AS seq) AS s"
            ),
            {"id": entity_id, "table": self._record_cls.__tablename__},
        )

    # ─── EntityRepository ───────────────────────────────────────

    async def save(self, entity: E) -> E:
        async with self._storage("save"):
            record = self._to_record(entity)
            if entity.id is None:
                self._db.add(record)
            else:
                record = await self._db.merge(record)
                await self._advance_sequence(entity.id)
            await self._db.commit()
            await self._db.refresh(record)
            return self._to_entity(record)

    async def find_by_id(self, entity_id: int) -> E | None:
        async with self._storage("find_by_id"):
            record = await self._db.get(self._record_cls, entity_id)
            return self._to_entity(record) if record is not None else None

    async def find_all(self) -> list[E]:
        async with self._storage("find_all"):
            result = await self._db.execute(
                select(self._record_cls).order_by(self._record_cls.id),
            )
            return [self._to_entity(r) for r in result.scalars().all()]

    async def delete_by_id(self, entity_id: int) -> None:
        async with self._storage("delete_by_id"):
            record = await self._db.get(self._record_cls, entity_id)
            if record is None:
                return
            await self._db.delete(record)
            await self._db.commit()

    async def exists_by_id(self, entity_id: int) -> bool:
        async with self._storage("exists_by_id"):
            result = await self._db.execute(
                select(self._record_cls.id).where(self._record_cls.id == entity_id),
            )
            return result.scalar_one_or_none() is not None


def case_repository(db: AsyncSession) -> SqlEntityRepository[Case]:
    return SqlEntityRepository(db, Case, CaseRecord)


def task_repository(db: AsyncSession) -> SqlEntityRepository[Task]:
    return SqlEntityRepository(db, Task, TaskRecord)
