"""Shared Schema Pieces - camelCase wire format and the status update body.

Invariants:
    - Wire names are camelCase (caseNumber, dueDateTime, createdDate ...)
    - Inputs accept camelCase or snake_case; unknown fields are ignored
    - Blank (empty or whitespace-only) required text is rejected, non-blank text is kept verbatim
"""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for all API schemas."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def require_text(value: str, field_name: str) -> str:
    if not value.strip():
        raise ValueError(f"{field_name} cannot be empty or whitespace")
    return value


class StatusUpdate(CamelModel):
    """Body of PUT /{id}/status."""
    status: str

    @field_validator("status")
    @classmethod
    def status_not_blank(cls, v: str) -> str:
        return require_text(v, "status")
