"""Task Routes - CRUD and status update for /api/tasks.

Invariants:
    - Blank or missing title/status rejected by TaskCreate / StatusUpdate (400) before the service runs
    - Unknown id → ResourceNotFoundError → 404 via the global handler
    - DELETE returns 204 with an empty body
"""

from fastapi import APIRouter, Depends, Response, status

from casework.api.dependencies import get_task_service
from casework.core.entities import Task
from casework.core.errors import ResourceNotFoundError
from casework.schemas.common import StatusUpdate
from casework.schemas.task import TaskCreate, TaskResponse
from casework.services.entity_service import EntityService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.post(
    "", response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: TaskCreate,
    service: EntityService[Task] = Depends(get_task_service),
):
    """Create a task."""
    task = await service.create(body.to_entity())
    return TaskResponse.model_validate(task)


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    service: EntityService[Task] = Depends(get_task_service),
):
    """List every task (empty list when there are none)."""
    return [TaskResponse.model_validate(t) for t in await service.get_all()]


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int,
    service: EntityService[Task] = Depends(get_task_service),
):
    task = await service.get_by_id(task_id)
    if task is None:
        raise ResourceNotFoundError("Task", str(task_id))
    return TaskResponse.model_validate(task)


@router.put("/{task_id}/status", response_model=TaskResponse)
async def update_task_status(
    task_id: int,
    body: StatusUpdate,
    service: EntityService[Task] = Depends(get_task_service),
):
    """Replace the task's status."""
    task = await service.update_status(task_id, body.status)
    if task is None:
        raise ResourceNotFoundError("Task", str(task_id))
    return TaskResponse.model_validate(task)


@router.delete(
    "/{task_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_task(
    task_id: int,
    service: EntityService[Task] = Depends(get_task_service),
):
    if not await service.delete(task_id):
        raise ResourceNotFoundError("Task", str(task_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
