"""Case ORM - persisted form of core.entities.Case.

Invariants:
    - id is an autoincrement integer primary key, never reused (sqlite_autoincrement)
    - title and status are non-nullable; text columns carry no length limit
    - case_number is not unique: callers may reuse it

Design Decisions:
    - Record suffix keeps the ORM class distinct from the Case dataclass
"""

from datetime import datetime

from sqlalchemy import Text, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from casework.db.base import Base


class CaseRecord(Base):
    """Row in the cases table."""
    __tablename__ = "cases"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    case_number: Mapped[str | None] = mapped_column(
        Text, nullable=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(Text, nullable=False)
    created_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    updated_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
