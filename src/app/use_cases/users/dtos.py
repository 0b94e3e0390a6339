"""
User Profile Use Case DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.base import CamelModel
from src.domain.entities import User


class UpdateProfileCommand(BaseModel):
    """
    Profile fields a user may change; email is immutable

    Only fields in ``model_fields_set`` are applied, as for task updates.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None


class ProfileResponse(CamelModel):
    """A user's own profile, without password material"""

    id: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "ProfileResponse":
        return cls(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
