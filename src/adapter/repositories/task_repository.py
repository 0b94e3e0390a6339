from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.task_repository import ITaskRepository
from src.domain.entities import Task, TaskStatus


class TaskRepository(ITaskRepository):
    """Task repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, task: Task) -> Task:
        """Create a new task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def list_by_owner(
        self, user_id: UUID, status: Optional[TaskStatus] = None
    ) -> List[Task]:
        """List a user's tasks, newest first; ID breaks timestamp ties"""
        stmt = select(Task).where(Task.user_id == user_id)
        if status is not None:
            stmt = stmt.where(Task.status == status)
        stmt = stmt.order_by(col(Task.created_at).desc(), col(Task.id).desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_for_owner(self, task_id: UUID, user_id: UUID) -> Optional[Task]:
        """Get a task only if it belongs to the given user"""
        stmt = select(Task).where(Task.id == task_id, Task.user_id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, task: Task) -> Task:
        """Update existing task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def delete(self, task: Task) -> None:
        """Delete a task"""
        await self.session.delete(task)
        await self.session.flush()
