"""
Login Use Case

Verifies credentials and issues a signed session token.
"""

import logging
from datetime import timedelta

import bcrypt

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.api.utils.jwt import DEFAULT_ALGORITHM, create_access_token
from src.domain.validation import BCRYPT_MAX_PASSWORD_BYTES, normalize_email
from .dtos import LoginCommand, LoginResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Unknown email and wrong password give the same error (no enumeration)
    - Constant-time password comparison to prevent timing attacks
    - Token embeds the user ID and expires after token_ttl (7 days)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        secret: str,
        token_ttl: timedelta = timedelta(days=7),
        algorithm: str = DEFAULT_ALGORITHM,
        bcrypt_rounds: int = 10,
    ):
        self.uow = uow
        self.secret = secret
        self.token_ttl = token_ttl
        self.algorithm = algorithm
        self.bcrypt_rounds = bcrypt_rounds

    async def execute(self, command: LoginCommand) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            command: LoginCommand with email and plain text password

        Returns:
            Result with LoginResponse containing the token, or
            Error(INVALID_CREDENTIALS)
        """
        password = command.password.encode("utf-8")
        if len(password) > BCRYPT_MAX_PASSWORD_BYTES:
            return Return.err(INVALID_CREDENTIALS)

        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(command.email))

            # Always perform a hash check even if user not found
            if user is None:
                bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(self.bcrypt_rounds))
                return Return.err(INVALID_CREDENTIALS)

            if not bcrypt.checkpw(password, user.password_hash.encode("utf-8")):
                return Return.err(INVALID_CREDENTIALS)

            # Leaving the block rolls back and expires the loaded user
            token = create_access_token(
                user.id, self.secret, self.token_ttl, algorithm=self.algorithm
            )
            logger.info(f"User {user.id} logged in")

            return Return.ok(
                LoginResponse(
                    user_id=str(user.id), token=token, message="Login successful"
                )
            )
