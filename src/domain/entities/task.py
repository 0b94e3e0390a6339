"""
Task Entity

A unit of work owned by exactly one user.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import TaskStatus


class Task(SQLModel, table=True):
    """
    Task entity - owned by a single user.

    Business Rules:
    - Title required, trimmed, at most 100 chars
    - Description required, trimmed, at most 500 chars
    - Status transitions are unconstrained
    - Only visible to / mutable by its owner
    """

    __tablename__ = "tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=100)
    description: str = Field(max_length=500)
    status: TaskStatus = Field(default=TaskStatus.pending)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_task_user_status", "user_id", "status"),)
