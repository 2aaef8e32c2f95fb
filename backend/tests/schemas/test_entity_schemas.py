"""Entity Schemas - boundary validation and camelCase wire format.

Invariants:
    - title and status: required and non-blank, kept verbatim when valid
    - camelCase and snake_case both accepted on input; camelCase on output
    - server-owned fields ignored on input
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from casework.core.entities import Case, Task
from casework.schemas.case import CaseCreate, CaseResponse
from casework.schemas.common import StatusUpdate
from casework.schemas.task import TaskCreate, TaskResponse


def test_task_create_accepts_camel_case():
    body = TaskCreate.model_validate({
        "title": "Test Task", "status": "TODO",
        "caseId": "CASE-123456", "dueDateTime": "2030-01-01T10:00:00Z",
    })
    assert body.case_id == "CASE-123456"
    assert body.due_date_time == datetime(2030, 1, 1, 10, tzinfo=timezone.utc)


@pytest.mark.parametrize("sent", ["2030-05-01T08:00:00+02:00", "2030-05-01T06:00:00"])
def test_task_create_normalizes_due_date_time_to_utc(sent):
    body = TaskCreate.model_validate({
        "title": "t", "status": "TODO", "dueDateTime": sent,
    })
    assert body.due_date_time == datetime(2030, 5, 1, 6, tzinfo=timezone.utc)
    assert body.due_date_time.tzinfo is timezone.utc


def test_task_create_keeps_surrounding_whitespace():
    body = TaskCreate(title="  padded  ", status="TODO")
    assert body.title == "  padded  "


@pytest.mark.parametrize("title", ["", "   ", "\n\t"])
def test_task_create_rejects_blank_title(title):
    with pytest.raises(ValidationError):
        TaskCreate(title=title, status="TODO")


def test_task_create_requires_status():
    with pytest.raises(ValidationError):
        TaskCreate.model_validate({"title": "x"})


def test_task_create_to_entity_has_no_server_fields():
    entity = TaskCreate.model_validate(
        {"title": "x", "status": "TODO", "id": 9, "createdDate": "2020-01-01T00:00:00Z"},
    ).to_entity()
    assert isinstance(entity, Task)
    assert entity.id is None
    assert entity.created_date is None


def test_case_create_accepts_case_number_alias():
    entity = CaseCreate.model_validate(
        {"caseNumber": "ABC12345", "title": "t", "status": "OPEN"},
    ).to_entity()
    assert isinstance(entity, Case)
    assert entity.case_number == "ABC12345"


def test_case_create_rejects_blank_status():
    with pytest.raises(ValidationError):
        CaseCreate(title="t", status=" ")


def test_responses_dump_camel_case():
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    task = Task(title="t", status="TODO", case_id="C-1", id=1,
                created_date=now, updated_date=now)
    dumped = TaskResponse.model_validate(task).model_dump(by_alias=True)
    assert {"caseId", "dueDateTime", "createdDate", "updatedDate"} <= dumped.keys()

    case = Case(title="c", status="OPEN", case_number="ABC", id=2)
    assert CaseResponse.model_validate(case).model_dump(by_alias=True)["caseNumber"] == "ABC"


@pytest.mark.parametrize("payload", [{}, {"status": ""}, {"status": "  "}])
def test_status_update_rejects_blank(payload):
    with pytest.raises(ValidationError):
        StatusUpdate.model_validate(payload)


def test_status_update_accepts_any_non_blank_string():
    assert StatusUpdate(status="whatever-you-like").status == "whatever-you-like"
