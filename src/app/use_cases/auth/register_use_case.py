"""
Register Use Case

Validates a candidate identity and persists it with a hashed password.
"""

import logging

import bcrypt
from sqlalchemy.exc import IntegrityError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.domain.validation import (
    check_email,
    check_name,
    check_password_complexity,
    first_error,
    normalize_email,
    require_fields,
)
from .dtos import RegisterCommand, RegisterResponse

logger = logging.getLogger(__name__)

EMAIL_ALREADY_EXISTS = Error(
    "EMAIL_ALREADY_EXISTS", "User with given email already exists"
)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Validate, stopping at the first failing rule:
       fields present -> name lengths -> email shape -> password policy
    2. Check email uniqueness (case-insensitive)
    3. Hash password with bcrypt (per-record salt, configurable cost)
    4. Persist the User and commit
    """

    def __init__(self, uow: UnitOfWork, bcrypt_rounds: int = 10):
        self.uow = uow
        self.bcrypt_rounds = bcrypt_rounds

    def _validate(self, command: RegisterCommand) -> Result[None]:
        return first_error(
            [
                lambda: require_fields(
                    {
                        "firstName": command.first_name,
                        "lastName": command.last_name,
                        "email": command.email,
                        "password": command.password,
                    }
                ),
                lambda: check_name("firstName", command.first_name),
                lambda: check_name("lastName", command.last_name),
                lambda: check_email(command.email),
                lambda: check_password_complexity(command.password),
            ]
        )

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with the candidate identity

        Returns:
            Result[RegisterResponse], or Error(VALIDATION_ERROR) for the first
            violated rule, or Error(EMAIL_ALREADY_EXISTS)
        """
        validation = self._validate(command)
        if validation.is_err():
            return Return.err(validation.error)

        email = normalize_email(command.email)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(EMAIL_ALREADY_EXISTS)

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(self.bcrypt_rounds)
            )

            user = User(
                first_name=command.first_name.strip(),
                last_name=command.last_name.strip(),
                email=email,
                password_hash=password_hash.decode("utf-8"),
            )

            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except IntegrityError:
                # Lost a race with a concurrent registration of the same email
                await self.uow.rollback()
                return Return.err(EMAIL_ALREADY_EXISTS)

            logger.info(f"Registered user {user.id}")

            return Return.ok(
                RegisterResponse(
                    user_id=str(user.id), message="User created successfully"
                )
            )
