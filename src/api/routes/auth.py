from datetime import timedelta

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import LoginCommand, LoginUseCase
from src.depends import get_config, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    The email is not shape-checked here; a malformed email simply fails
    as invalid credentials.
    """

    model_config = ConfigDict(extra="forbid")

    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")


class TokenResponse(BaseModel):
    """POST /auth response payload"""

    token: str
    message: str


@router.post("", status_code=status.HTTP_200_OK, response_model=TokenResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    User Login

    Verifies credentials and returns a session token valid for
    TOKEN_EXPIRE_DAYS days.

    Raises:
        - 400 Bad Request: Missing email or password
        - 401 Unauthorized: Invalid email or password (same message for both)
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(
        uow,
        secret=config.JWT_SECRET,
        token_ttl=timedelta(days=config.TOKEN_EXPIRE_DAYS),
        algorithm=config.JWT_ALGORITHM,
        bcrypt_rounds=config.BCRYPT_ROUNDS,
    )
    result = await use_case.execute(
        LoginCommand(email=request.email, password=request.password)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
