import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..repositories.task_repository import SqlAlchemyTaskRepository
from ..schemas.task import TaskCreate, TaskUpdate, TaskResponse
from ..services.task_service import TaskService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    """Compose the task service over the request's database session"""
    return TaskService(SqlAlchemyTaskRepository(db))


@router.get("", response_model=List[TaskResponse])
@router.get("/", response_model=List[TaskResponse], include_in_schema=False)
async def get_all_tasks(service: TaskService = Depends(get_task_service)):
    """List every task"""
    return [TaskResponse.model_validate(task) for task in service.get_all_tasks()]


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(task_id: int, service: TaskService = Depends(get_task_service)):
    """Get a specific task by ID"""
    return TaskResponse.model_validate(service.get_task_by_id(task_id))


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
@router.post(
    "/",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False
)
async def create_task(
    task_data: TaskCreate,
    service: TaskService = Depends(get_task_service)
):
    """Create a new task"""
    try:
        return TaskResponse.model_validate(service.create_task(task_data))
    except SQLAlchemyError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error creating task: {str(e)}"
        )


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: int,
    task_update: TaskUpdate,
    service: TaskService = Depends(get_task_service)
):
    """Replace the fields of a task"""
    try:
        return TaskResponse.model_validate(service.update_task(task_id, task_update))
    except SQLAlchemyError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error updating task: {str(e)}"
        )


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: int, service: TaskService = Depends(get_task_service)):
    """Delete a task; deleting a missing task still succeeds"""
    try:
        service.delete_task(task_id)
    except SQLAlchemyError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error deleting task: {str(e)}"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
