"""ORM Models - SQLAlchemy declarative models for cases and tasks.

Invariants:
    - All models inherit from Base (db/base.py)
    - Case and Task tables are independent (task.case_id is free text, no FK)

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all / alembic
"""

from casework.models.case import CaseRecord  # noqa: F401
from casework.models.task import TaskRecord  # noqa: F401
