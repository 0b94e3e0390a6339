"""
Create Task Use Case
"""

import logging
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Task, TaskStatus
from src.domain.validation import (
    check_description,
    check_task_status,
    check_title,
    first_error,
)
from .dtos import CreateTaskCommand, TaskResponse

logger = logging.getLogger(__name__)


class CreateTaskUseCase:
    """
    Use case for creating a task owned by the caller.

    Business Rules:
    - Title (<= 100 chars) and description (<= 500 chars) are required
      and stored trimmed
    - Status defaults to pending
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def _validate(self, command: CreateTaskCommand) -> Result[None]:
        rules = [
            lambda: check_title(command.title),
            lambda: check_description(command.description),
        ]
        if command.status is not None:
            rules.append(lambda: check_task_status(command.status))
        return first_error(rules)

    async def execute(
        self, user_id: UUID, command: CreateTaskCommand
    ) -> Result[TaskResponse]:
        validation = self._validate(command)
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            task = Task(
                title=command.title.strip(),
                description=command.description.strip(),
                status=TaskStatus(command.status or TaskStatus.pending),
                user_id=user_id,
            )
            task = await self.uow.tasks.create(task)
            await self.uow.commit()

            logger.info(f"User {user_id} created task {task.id}")

            return Return.ok(TaskResponse.from_entity(task))
