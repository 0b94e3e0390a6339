"""
Get Task Use Case
"""

from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import TaskResponse

# Same error whether the task is missing or belongs to someone else
TASK_NOT_FOUND = Error("TASK_NOT_FOUND", "Task not found")


class GetTaskUseCase:
    """Use case for reading one of the caller's tasks"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, task_id: UUID) -> Result[TaskResponse]:
        async with self.uow:
            task = await self.uow.tasks.get_for_owner(task_id, user_id)
            if task is None:
                return Return.err(TASK_NOT_FOUND)

            return Return.ok(TaskResponse.from_entity(task))
