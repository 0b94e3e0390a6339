"""
Task Use Cases

Owner-scoped CRUD over tasks.
"""

from .create_task_use_case import CreateTaskUseCase
from .list_tasks_use_case import ListTasksUseCase
from .get_task_use_case import GetTaskUseCase
from .update_task_use_case import UpdateTaskUseCase
from .delete_task_use_case import DeleteTaskUseCase
from .dtos import (
    CreateTaskCommand,
    UpdateTaskCommand,
    TaskResponse,
    DeleteTaskResponse,
)

__all__ = [
    # Use Cases
    "CreateTaskUseCase",
    "ListTasksUseCase",
    "GetTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    # DTOs - Commands
    "CreateTaskCommand",
    "UpdateTaskCommand",
    # DTOs - Responses
    "TaskResponse",
    "DeleteTaskResponse",
]
