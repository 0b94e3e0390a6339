"""
List Tasks Use Case
"""

from typing import List, Optional
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TaskStatus
from .dtos import TaskResponse


class ListTasksUseCase:
    """
    Use case for listing the caller's tasks, newest first.

    A status filter outside the known values is ignored rather than
    rejected, and the full list is returned.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, status: Optional[str] = None
    ) -> Result[List[TaskResponse]]:
        status_filter = None
        if status in TaskStatus.values():
            status_filter = TaskStatus(status)

        async with self.uow:
            tasks = await self.uow.tasks.list_by_owner(user_id, status_filter)
            return Return.ok([TaskResponse.from_entity(task) for task in tasks])
