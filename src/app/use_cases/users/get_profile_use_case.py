"""
Get Profile Use Case

Loads the caller's own profile.
"""

from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ProfileResponse

USER_NOT_FOUND = Error("USER_NOT_FOUND", "User not found")


class GetProfileUseCase:
    """
    Use case for loading the current user's profile.

    The user ID comes from a verified token, but the account may have been
    removed out of band since the token was issued.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[ProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(USER_NOT_FOUND)

            return Return.ok(ProfileResponse.from_entity(user))
