"""Dependencies - wire repositories and services into route handlers.

Invariants:
    - SQL backend: one repository per request, bound to a request-scoped AsyncSession
    - Memory backend: one InMemoryRepository per entity type per app, shared by all requests
    - Services are cheap and built per request; they hold no state of their own

Design Decisions:
    - The memory stores live on app.state; the repository dependencies read them
      from the request, so routes and services are identical for both backends
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Callable

from fastapi import Depends, FastAPI, Request
from sqlalchemy.ext.asyncio import AsyncSession

from casework.core.entities import Case, Task
from casework.core.repository_protocols import EntityRepository
import casework.infrastructure.database as database
from casework.repositories.memory_repository import InMemoryRepository
from casework.repositories.sql_repository import case_repository, task_repository
from casework.services.entity_service import EntityService

logger = logging.getLogger(__name__)


def memory_stores(app: FastAPI) -> dict[str, InMemoryRepository] | None:
    return getattr(app.state, "memory_repositories", None)


@asynccontextmanager
async def _repository(
    request: Request,
    resource: str,
    sql_factory: Callable[[AsyncSession], EntityRepository],
) -> AsyncGenerator[EntityRepository, None]:
    stores = memory_stores(request.app)
    if stores is not None:
        yield stores[resource]
        return
    if database.db_manager is None:
        raise RuntimeError("Database not initialized")
    async with database.db_manager.session() as db:
        yield sql_factory(db)


async def get_case_repository(
    request: Request,
) -> AsyncGenerator[EntityRepository[Case], None]:
    async with _repository(request, "cases", case_repository) as repository:
        yield repository


async def get_task_repository(
    request: Request,
) -> AsyncGenerator[EntityRepository[Task], None]:
    async with _repository(request, "tasks", task_repository) as repository:
        yield repository


def get_case_service(
    repository: EntityRepository[Case] = Depends(get_case_repository),
) -> EntityService[Case]:
    return EntityService(repository, "Case")


def get_task_service(
    repository: EntityRepository[Task] = Depends(get_task_repository),
) -> EntityService[Task]:
    return EntityService(repository, "Task")


def use_memory_storage(app: FastAPI) -> dict[str, InMemoryRepository]:
    """Back both resources with process-local stores owned by this app."""
    stores: dict[str, InMemoryRepository] = {
        "cases": InMemoryRepository[Case](),
        "tasks": InMemoryRepository[Task](),
    }
    app.state.memory_repositories = stores
    logger.info("In-memory storage enabled", extra={"operation": "startup"})
    return stores
