"""Task ORM - persisted form of core.entities.Task.

Invariants:
    - id is an autoincrement integer primary key, never reused (sqlite_autoincrement)
    - case_id is free text holding a case_number; no foreign key to cases
    - text columns carry no length limit, matching the unbounded API fields
"""

from datetime import datetime

from sqlalchemy import Text, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from casework.db.base import Base


class TaskRecord(Base):
    """Row in the tasks table."""
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(Text, nullable=False)
    case_id: Mapped[str | None] = mapped_column(
        Text, nullable=True, index=True,
    )
    due_date_time: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    updated_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
