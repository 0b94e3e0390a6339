"""
Delete Task Use Case
"""

import logging
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import DeleteTaskResponse
from .get_task_use_case import TASK_NOT_FOUND

logger = logging.getLogger(__name__)


class DeleteTaskUseCase:
    """
    Use case for deleting one of the caller's tasks.

    Deleting an already deleted task reports TASK_NOT_FOUND.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, task_id: UUID) -> Result[DeleteTaskResponse]:
        async with self.uow:
            task = await self.uow.tasks.get_for_owner(task_id, user_id)
            if task is None:
                return Return.err(TASK_NOT_FOUND)

            await self.uow.tasks.delete(task)
            await self.uow.commit()

            logger.info(f"User {user_id} deleted task {task_id}")

            return Return.ok(DeleteTaskResponse(message="Task deleted successfully"))
