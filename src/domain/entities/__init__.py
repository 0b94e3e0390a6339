"""
Task Tracker Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

from .enums import TaskStatus
from .user import User
from .task import Task

__all__ = [
    # Enums
    "TaskStatus",
    # Entities
    "User",
    "Task",
]
