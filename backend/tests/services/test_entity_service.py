"""Entity Service - verifies lifecycle rules over the in-memory repository.

Invariants:
    - create stamps created_date == updated_date and assigns an unused id
    - update_status changes only status and updated_date (strictly later)
    - missing ids: None / False, no record created
    - repository errors propagate unchanged
"""

from datetime import datetime, timedelta, timezone

import pytest

from casework.core.entities import Case, Task
from casework.core.errors import DatabaseError
from casework.repositories.memory_repository import InMemoryRepository
from casework.services.entity_service import EntityService

T0 = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


class _StepClock:
    """Returns T0, T0 + step, T0 + 2*step, ..."""

    def __init__(self, step: timedelta = timedelta(seconds=1)):
        self._now = T0 - step
        self._step = step

    def __call__(self) -> datetime:
        self._now += self._step
        return self._now


@pytest.fixture
def task_repo():
    return InMemoryRepository[Task]()


@pytest.fixture
def task_service(task_repo):
    return EntityService(task_repo, "Task", clock=_StepClock())


def _task(**overrides) -> Task:
    fields = {
        "title": "Test Task", "description": "Test Description",
        "status": "TODO", "case_id": "CASE-123456",
    }
    fields.update(overrides)
    return Task(**fields)


# --- create -------------------------------------------------------------------

async def test_create_assigns_id_and_timestamps(task_service):
    created = await task_service.create(_task())
    assert created.id == 1
    assert created.created_date == T0
    assert created.updated_date == T0
    assert created.title == "Test Task"
    assert created.case_id == "CASE-123456"


async def test_create_does_not_mutate_argument(task_service):
    task = _task()
    await task_service.create(task)
    assert task.id is None
    assert task.created_date is None


async def test_created_id_is_stable(task_service):
    created = await task_service.create(_task())
    assert (await task_service.get_by_id(created.id)).id == created.id
    assert (await task_service.get_by_id(created.id)) == created


async def test_create_tolerates_unvalidated_input(task_service):
    created = await task_service.create(_task(title="", status=" "))
    assert created.title == ""
    assert created.status == " "


# --- read ---------------------------------------------------------------------

async def test_get_by_unknown_id_returns_none(task_service, task_repo):
    assert await task_service.get_by_id(42) is None
    assert await task_repo.exists_by_id(42) is False


async def test_get_all_after_two_creates(task_service):
    a = await task_service.create(_task(title="Task 1"))
    b = await task_service.create(_task(title="Task 2", status="IN_PROGRESS"))
    everything = await task_service.get_all()
    assert len(everything) == 2
    assert {t.id for t in everything} == {a.id, b.id}
    assert {t.title for t in everything} == {"Task 1", "Task 2"}


async def test_get_all_empty(task_service):
    assert await task_service.get_all() == []


# --- update_status ------------------------------------------------------------

async def test_update_status_changes_only_status_and_updated_date(task_service):
    created = await task_service.create(_task())
    updated = await task_service.update_status(created.id, "COMPLETED")
    assert updated.status == "COMPLETED"
    assert updated.updated_date > created.updated_date
    assert updated.created_date == created.created_date
    for field in ("id", "title", "description", "case_id", "due_date_time"):
        assert getattr(updated, field) == getattr(created, field)
    assert (await task_service.get_by_id(created.id)).status == "COMPLETED"


async def test_update_status_when_clock_stalls_still_advances(task_repo):
    service = EntityService(task_repo, "Task", clock=lambda: T0)
    created = await service.create(_task())
    updated = await service.update_status(created.id, "DONE")
    assert updated.updated_date > created.updated_date


async def test_update_status_when_clock_goes_backwards_still_advances(task_repo):
    service = EntityService(
        task_repo, "Task", clock=_StepClock(step=-timedelta(seconds=5)),
    )
    created = await service.create(_task())
    updated = await service.update_status(created.id, "DONE")
    assert updated.updated_date > created.updated_date


async def test_any_status_may_replace_any_other(task_service):
    created = await task_service.create(_task(status="DONE"))
    updated = await task_service.update_status(created.id, "TODO")
    assert updated.status == "TODO"


async def test_update_status_of_unknown_id_creates_nothing(task_service, task_repo):
    assert await task_service.update_status(7, "COMPLETED") is None
    assert await task_repo.exists_by_id(7) is False
    assert await task_service.get_all() == []


# --- delete -------------------------------------------------------------------

async def test_delete_twice(task_service):
    created = await task_service.create(_task())
    assert await task_service.delete(created.id) is True
    assert await task_service.delete(created.id) is False
    assert await task_service.get_by_id(created.id) is None


async def test_delete_unknown_id(task_service):
    assert await task_service.delete(999) is False
    assert await task_service.get_by_id(999) is None


# --- both entity types --------------------------------------------------------

async def test_case_service_uses_same_rules():
    service = EntityService(InMemoryRepository[Case](), "Case", clock=_StepClock())
    created = await service.create(Case(title="Case", status="OPEN", case_number="ABC12345"))
    updated = await service.update_status(created.id, "CLOSED")
    assert updated.case_number == "ABC12345"
    assert updated.status == "CLOSED"
    assert service.entity_name == "Case"


async def test_case_and_task_services_do_not_share_ids():
    cases = EntityService(InMemoryRepository[Case](), "Case")
    tasks = EntityService(InMemoryRepository[Task](), "Task")
    assert (await cases.create(Case(title="c", status="OPEN"))).id == 1
    assert (await tasks.create(Task(title="t", status="TODO"))).id == 1


# --- failures -----------------------------------------------------------------

class _BrokenRepository:
    def __init__(self):
        self.error = DatabaseError("Connection or operational error", "execute")

    async def save(self, entity):
        raise self.error

    async def find_by_id(self, entity_id):
        raise self.error

    async def find_all(self):
        raise self.error

    async def delete_by_id(self, entity_id):
        raise self.error

    async def exists_by_id(self, entity_id):
        raise self.error


@pytest.mark.parametrize("call", [
    lambda s: s.create(_task()),
    lambda s: s.get_by_id(1),
    lambda s: s.get_all(),
    lambda s: s.update_status(1, "X"),
    lambda s: s.delete(1),
])
async def test_repository_errors_propagate_unchanged(call):
    repo = _BrokenRepository()
    service = EntityService(repo, "Task")
    with pytest.raises(DatabaseError) as exc_info:
        await call(service)
    assert exc_info.value is repo.error
