"""
Task Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the task domain.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.base import CamelModel
from src.domain.entities import Task


# ============================================================================
# Command DTOs
# ============================================================================


class CreateTaskCommand(BaseModel):
    """Create command - presence and lengths are checked by the use case"""

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class UpdateTaskCommand(BaseModel):
    """
    Update command - merge-patch over title, description and status

    Only fields present in ``model_fields_set`` are applied, so an
    explicit ``None`` is a validation failure rather than "leave as is".
    """

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class TaskResponse(CamelModel):
    """A single task"""

    id: str
    title: str
    description: str
    status: str
    user_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        return cls(
            id=str(task.id),
            title=task.title,
            description=task.description,
            status=task.status.value,
            user_id=str(task.user_id),
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class DeleteTaskResponse(BaseModel):
    """Response for delete task use case"""

    message: str
