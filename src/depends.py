from typing import Optional
from uuid import UUID

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import get_user_id, verify_jwt
from src.libs.result import Error

# auto_error=False so a missing header gets our own 401 body
security = HTTPBearer(auto_error=False)


def build_engine(db_uri: str) -> AsyncEngine:
    return create_async_engine(db_uri, echo=False, future=True)


def build_session_factory(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


def get_config(request: Request):
    """Application configuration the app was created with"""
    return request.app.state.config


async def get_unit_of_work(request: Request):
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    config=Depends(get_config),
) -> UUID:
    """
    Dependency resolving the caller's identity from the Authorization header.

    Only the verified token is trusted; the user record is not loaded here.

    Returns:
        ID of the authenticated user

    Raises:
        ClientError: 401 AUTHENTICATION_REQUIRED if the header is missing or
            not of the form "Bearer <token>"; 401 INVALID_TOKEN if the token
            is malformed, badly signed or expired
    """
    if credentials is None:
        raise ClientError(
            Error("AUTHENTICATION_REQUIRED", "Authentication required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = verify_jwt(
        credentials.credentials, config.JWT_SECRET, config.JWT_ALGORITHM
    )
    user_id = get_user_id(payload) if payload is not None else None

    if user_id is None:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return user_id
