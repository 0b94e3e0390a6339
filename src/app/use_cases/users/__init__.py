"""
User Use Cases

Profile accessors for the authenticated user.
"""

from .get_profile_use_case import GetProfileUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .dtos import ProfileResponse, UpdateProfileCommand

__all__ = [
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "ProfileResponse",
    "UpdateProfileCommand",
]
