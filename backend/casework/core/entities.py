"""Entities - the Case and Task records the service layer operates on.

Invariants:
    - id is None until the first save, then never reassigned
    - created_date is set once, at creation; updated_date on creation and every status update
    - status is an open string: no enum, no transition graph
    - title and status are never stored blank (checked at the HTTP boundary)

Design Decisions:
    - Plain dataclasses, not ORM rows: the service and the in-memory backend never touch SQLAlchemy
    - TrackedEntity Protocol lets one generic service handle both types
    - Case and Task share no base class; their common fields are a structural contract
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, TypeVar


class TrackedEntity(Protocol):
    """Fields the lifecycle service reads and writes on any entity."""
    id: int | None
    title: str
    status: str
    created_date: datetime | None
    updated_date: datetime | None


@dataclass
class Case:
    """A case file. case_number is caller-supplied and not checked for uniqueness."""
    title: str
    status: str
    case_number: str | None = None
    description: str | None = None
    id: int | None = None
    created_date: datetime | None = None
    updated_date: datetime | None = None


@dataclass
class Task:
    """A unit of work. case_id holds a Case's case_number as free text."""
    title: str
    status: str
    description: str | None = None
    case_id: str | None = None
    due_date_time: datetime | None = None
    id: int | None = None
    created_date: datetime | None = None
    updated_date: datetime | None = None


E = TypeVar("E", bound=TrackedEntity)
