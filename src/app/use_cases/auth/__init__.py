"""
Authentication Use Cases

Registration and credential verification.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .dtos import LoginCommand, LoginResponse, RegisterCommand, RegisterResponse

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "LoginCommand",
    # DTOs - Responses
    "RegisterResponse",
    "LoginResponse",
]
