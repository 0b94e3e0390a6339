from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Task, TaskStatus


class ITaskRepository(ABC):
    """
    Task repository interface - application layer

    Every read and write is scoped by the owning user's ID.
    """

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Create a new task"""
        pass

    @abstractmethod
    async def list_by_owner(
        self, user_id: UUID, status: Optional[TaskStatus] = None
    ) -> List[Task]:
        """List a user's tasks, newest first, optionally filtered by status"""
        pass

    @abstractmethod
    async def get_for_owner(self, task_id: UUID, user_id: UUID) -> Optional[Task]:
        """Get a task only if it belongs to the given user"""
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """Update existing task"""
        pass

    @abstractmethod
    async def delete(self, task: Task) -> None:
        """Delete a task"""
        pass
