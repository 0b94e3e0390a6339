from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import RegisterCommand, RegisterUseCase
from src.app.use_cases.users import (
    GetProfileUseCase,
    ProfileResponse,
    UpdateProfileCommand,
    UpdateProfileUseCase,
)
from src.depends import get_config, get_current_user_id, get_unit_of_work
from src.domain.base import CamelModel

router = APIRouter(prefix="/users", tags=["User"])


class RegisterRequest(CamelModel):
    """
    Registration HTTP request payload

    Only the shape is checked here; the business rules (presence, lengths,
    email, password policy) run in RegisterUseCase in a fixed order.
    """

    model_config = ConfigDict(extra="forbid")

    first_name: Optional[str] = Field(None, description="First name (2-50 chars)")
    last_name: Optional[str] = Field(None, description="Last name (2-50 chars)")
    email: Optional[str] = Field(None, description="User email address")
    password: Optional[str] = Field(None, description="Password meeting the complexity policy")


class UpdateProfileRequest(CamelModel):
    """Profile update payload; email is immutable so it is not accepted"""

    model_config = ConfigDict(extra="forbid")

    first_name: Optional[str] = Field(None, description="First name (2-50 chars)")
    last_name: Optional[str] = Field(None, description="Last name (2-50 chars)")


class MessageResponse(BaseModel):
    message: str


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MessageResponse)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    User Registration

    Raises:
        - 400 Bad Request: First violated validation rule
        - 409 Conflict: Email already registered (case-insensitive)
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        password=request.password,
    )

    use_case = RegisterUseCase(uow, bcrypt_rounds=config.BCRYPT_ROUNDS)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/profile", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_profile(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current User Profile

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
        - 404 Not Found: Account no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/profile", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def update_profile(
    request: UpdateProfileRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Current User Profile

    Raises:
        - 400 Bad Request: Name length out of range or unknown field
        - 401 Unauthorized: Missing, invalid or expired token
        - 404 Not Found: Account no longer exists
        - 500 Internal Server Error: Server error
    """
    command = UpdateProfileCommand(**request.model_dump(exclude_unset=True))

    use_case = UpdateProfileUseCase(uow)
    result = await use_case.execute(user_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
