"""
Task Tracker Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task progress status"""

    pending = "pending"
    in_progress = "in-progress"
    completed = "completed"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
