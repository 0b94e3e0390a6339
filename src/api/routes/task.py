from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import ClientError, raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks import (
    CreateTaskCommand,
    CreateTaskUseCase,
    DeleteTaskResponse,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    TaskResponse,
    UpdateTaskCommand,
    UpdateTaskUseCase,
)
from src.depends import get_current_user_id, get_unit_of_work
from src.libs.result import Error

router = APIRouter(prefix="/tasks", tags=["Tasks"])


class CreateTaskRequest(BaseModel):
    """Create task HTTP request payload"""

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, description="Task title (max 100 chars)")
    description: Optional[str] = Field(None, description="Task description (max 500 chars)")
    status: Optional[str] = Field(None, description="pending, in-progress or completed")


class UpdateTaskRequest(BaseModel):
    """
    Update task HTTP request payload

    Only the listed fields are accepted; anything else is rejected.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


def parse_task_id(task_id: str) -> UUID:
    try:
        return UUID(task_id)
    except ValueError:
        raise ClientError(
            Error("INVALID_TASK_ID", "Invalid task ID"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TaskResponse)
async def create_task(
    request: CreateTaskRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Task

    Raises:
        - 400 Bad Request: Missing or too long title/description, bad status
        - 401 Unauthorized: Missing, invalid or expired token
    """
    command = CreateTaskCommand(
        title=request.title, description=request.description, status=request.status
    )

    use_case = CreateTaskUseCase(uow)
    result = await use_case.execute(user_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[TaskResponse])
async def list_tasks(
    status_filter: Optional[str] = Query(
        None, alias="status", description="Only return tasks with this status"
    ),
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Tasks

    Returns the caller's tasks, newest first. An unknown status value is
    ignored.
    """
    use_case = ListTasksUseCase(uow)
    result = await use_case.execute(user_id, status_filter)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskResponse)
async def get_task(
    task_id: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Task

    Raises:
        - 400 Bad Request: Task ID is not a valid ID
        - 404 Not Found: Task does not exist or belongs to another user
    """
    use_case = GetTaskUseCase(uow)
    result = await use_case.execute(user_id, parse_task_id(task_id))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskResponse)
async def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Task

    Merge-patch: fields left out of the body keep their current value.

    Raises:
        - 400 Bad Request: Invalid ID, invalid field value or unknown field
        - 404 Not Found: Task does not exist or belongs to another user
    """
    command = UpdateTaskCommand(**request.model_dump(exclude_unset=True))

    use_case = UpdateTaskUseCase(uow)
    result = await use_case.execute(user_id, parse_task_id(task_id), command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{task_id}", status_code=status.HTTP_200_OK, response_model=DeleteTaskResponse
)
async def delete_task(
    task_id: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Task

    Raises:
        - 400 Bad Request: Task ID is not a valid ID
        - 404 Not Found: Task does not exist, belongs to another user, or
          was already deleted
    """
    use_case = DeleteTaskUseCase(uow)
    result = await use_case.execute(user_id, parse_task_id(task_id))

    if result.is_err():
        raise_for_error(result.error)

    return result.value
