"""
Update Profile Use Case

Changes the caller's first and/or last name.
"""

import logging
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.validation import check_name, first_error
from .dtos import ProfileResponse, UpdateProfileCommand
from .get_profile_use_case import USER_NOT_FOUND

logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    """
    Use case for updating the current user's profile.

    Business Rules:
    - Only first_name and last_name are mutable
    - Provided names are re-validated (2-50 chars)
    - Omitted fields are left untouched; an explicit null is invalid
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def _validate(self, command: UpdateProfileCommand) -> Result[None]:
        provided = command.model_fields_set
        rules = []
        if "first_name" in provided:
            rules.append(lambda: check_name("firstName", command.first_name))
        if "last_name" in provided:
            rules.append(lambda: check_name("lastName", command.last_name))
        return first_error(rules)

    async def execute(
        self, user_id: UUID, command: UpdateProfileCommand
    ) -> Result[ProfileResponse]:
        validation = self._validate(command)
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(USER_NOT_FOUND)

            provided = command.model_fields_set
            if "first_name" in provided:
                user.first_name = command.first_name.strip()
            if "last_name" in provided:
                user.last_name = command.last_name.strip()
            user.updated_at = utcnow()

            user = await self.uow.users.update(user)
            await self.uow.commit()

            logger.info(f"Updated profile of user {user.id}")

            return Return.ok(ProfileResponse.from_entity(user))
