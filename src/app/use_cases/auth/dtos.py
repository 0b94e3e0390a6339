"""
Authentication Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- Commands: input to use cases (business intent, no HTTP concerns)
- Responses: structured output, decoupled from HTTP response format
"""

from typing import Optional

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - a candidate identity

    Fields are optional here; presence is the first validation rule the
    use case checks, so a missing field reports like any other rule.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginCommand(BaseModel):
    """Login command - credentials to verify"""

    email: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class RegisterResponse(BaseModel):
    """Response for user registration use case"""

    user_id: str
    message: str


class LoginResponse(BaseModel):
    """Response for user login use case"""

    user_id: str
    token: str
    message: str
