"""
Update Task Use Case

Merge-patch of title, description and status on one of the caller's tasks.
"""

import logging
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import TaskStatus
from src.domain.validation import (
    check_description,
    check_task_status,
    check_title,
    first_error,
)
from .dtos import TaskResponse, UpdateTaskCommand
from .get_task_use_case import TASK_NOT_FOUND

logger = logging.getLogger(__name__)


class UpdateTaskUseCase:
    """
    Use case for updating a task.

    Business Rules:
    - Only fields present in the command are changed
    - Present fields are validated with the same rules as on create
    - Any status may move to any other status
    - A task owned by another user is reported as not found
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def _validate(self, command: UpdateTaskCommand) -> Result[None]:
        provided = command.model_fields_set
        rules = []
        if "title" in provided:
            rules.append(lambda: check_title(command.title))
        if "description" in provided:
            rules.append(lambda: check_description(command.description))
        if "status" in provided:
            rules.append(lambda: check_task_status(command.status))
        return first_error(rules)

    async def execute(
        self, user_id: UUID, task_id: UUID, command: UpdateTaskCommand
    ) -> Result[TaskResponse]:
        validation = self._validate(command)
        if validation.is_err():
            return Return.err(validation.error)

        provided = command.model_fields_set

        async with self.uow:
            task = await self.uow.tasks.get_for_owner(task_id, user_id)
            if task is None:
                return Return.err(TASK_NOT_FOUND)

            if "title" in provided:
                task.title = command.title.strip()
            if "description" in provided:
                task.description = command.description.strip()
            if "status" in provided:
                task.status = TaskStatus(command.status)
            task.updated_at = utcnow()

            task = await self.uow.tasks.update(task)
            await self.uow.commit()

            logger.info(f"User {user_id} updated task {task.id}")

            return Return.ok(TaskResponse.from_entity(task))
