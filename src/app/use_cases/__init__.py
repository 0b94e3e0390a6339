"""
Use Cases

Organized into domain folders:
- auth/: Registration and login
- users/: Profile accessors
- tasks/: Owner-scoped task CRUD
"""

from .auth import (
    RegisterUseCase,
    RegisterCommand,
    LoginUseCase,
    LoginCommand,
)
from .users import (
    GetProfileUseCase,
    UpdateProfileUseCase,
)
from .tasks import (
    CreateTaskUseCase,
    ListTasksUseCase,
    GetTaskUseCase,
    UpdateTaskUseCase,
    DeleteTaskUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "RegisterCommand",
    "LoginUseCase",
    "LoginCommand",
    # Users
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    # Tasks
    "CreateTaskUseCase",
    "ListTasksUseCase",
    "GetTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
]
