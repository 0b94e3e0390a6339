from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

DEFAULT_ALGORITHM = "HS256"


def create_access_token(
    user_id: UUID,
    secret: str,
    expires_delta: timedelta,
    algorithm: str = DEFAULT_ALGORITHM,
    issued_at: Optional[datetime] = None,
) -> str:
    """
    Create a signed session token

    Args:
        user_id: ID of the authenticated user
        secret: Server-held signing secret
        expires_delta: Lifetime of the token, counted from issued_at
        algorithm: JWS algorithm
        issued_at: Issuance time (defaults to now)

    Returns:
        JWT token string
    """
    now = issued_at or datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_jwt(
    token: str, secret: str, algorithm: str = DEFAULT_ALGORITHM
) -> Optional[dict]:
    """
    Verify and decode a session token

    Signature and expiry are both checked.

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
        return payload
    except JWTError:
        return None


def get_user_id(payload: dict) -> Optional[UUID]:
    """Extract the user ID claim, or None if missing or malformed"""
    user_id = payload.get("user_id")
    if not isinstance(user_id, str):
        return None
    try:
        return UUID(user_id)
    except ValueError:
        return None
