"""Case Schemas - request and response bodies for /api/cases.

Invariants:
    - CaseCreate.title and CaseCreate.status: required, non-blank
    - id, createdDate and updatedDate are server-owned: never read from requests
"""

from datetime import datetime

from pydantic import field_validator

from casework.core.entities import Case
from casework.schemas.common import CamelModel, require_text


class CaseCreate(CamelModel):
    """Case creation payload."""
    case_number: str | None = None
    title: str
    description: str | None = None
    status: str

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        return require_text(v, "title")

    @field_validator("status")
    @classmethod
    def status_not_blank(cls, v: str) -> str:
        return require_text(v, "status")

    def to_entity(self) -> Case:
        return Case(
            case_number=self.case_number,
            title=self.title,
            description=self.description,
            status=self.status,
        )


class CaseResponse(CamelModel):
    """Case as returned by the API."""
    id: int
    case_number: str | None = None
    title: str
    description: str | None = None
    status: str
    created_date: datetime | None = None
    updated_date: datetime | None = None
