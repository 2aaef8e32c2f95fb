"""Task Schemas - request and response bodies for /api/tasks.

Invariants:
    - TaskCreate.title and TaskCreate.status: required, non-blank
    - caseId is free text (a Case's caseNumber); not checked against cases
    - dueDateTime is stored in UTC: offsets are converted, naive values are read as UTC
    - id, createdDate and updatedDate are server-owned: never read from requests
"""

from datetime import datetime

from pydantic import field_validator

from casework.core.entities import Task
from casework.core.timestamps import as_utc
from casework.schemas.common import CamelModel, require_text


class TaskCreate(CamelModel):
    """Task creation payload."""
    title: str
    description: str | None = None
    status: str
    case_id: str | None = None
    due_date_time: datetime | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        return require_text(v, "title")

    @field_validator("status")
    @classmethod
    def status_not_blank(cls, v: str) -> str:
        return require_text(v, "status")

    @field_validator("due_date_time")
    @classmethod
    def due_date_time_in_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)

    def to_entity(self) -> Task:
        return Task(
            title=self.title,
            description=self.description,
            status=self.status,
            case_id=self.case_id,
            due_date_time=self.due_date_time,
        )


class TaskResponse(CamelModel):
    """Task as returned by the API."""
    id: int
    title: str
    description: str | None = None
    status: str
    case_id: str | None = None
    due_date_time: datetime | None = None
    created_date: datetime | None = None
    updated_date: datetime | None = None
