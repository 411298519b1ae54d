import logging
from typing import List

from ..core.exceptions import TaskNotFoundError
from ..models.task import Task
from ..repositories.task_repository import TaskRepository
from ..schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


class TaskService:
    """Task operations over a TaskRepository"""

    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def get_all_tasks(self) -> List[Task]:
        return self.repository.find_all()

    def get_task_by_id(self, task_id: int) -> Task:
        """
        Look up a single task.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        task = self.repository.find_by_id(task_id)
        if task is None:
            logger.info(f"Task {task_id} not found")
            raise TaskNotFoundError(task_id)
        return task

    def create_task(self, task_data: TaskCreate) -> Task:
        """Store a new task; the store assigns its id."""
        task = Task(
            title=task_data.title,
            description=task_data.description,
            completed=task_data.completed
        )
        saved = self.repository.save(task)
        logger.info(f"Created task {saved.id}")
        return saved

    def update_task(self, task_id: int, task_data: TaskUpdate) -> Task:
        """
        Replace title, description and completed of an existing task.

        The id is kept. Nothing is created when the task is missing.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        task = self.get_task_by_id(task_id)

        task.title = task_data.title
        task.description = task_data.description
        task.completed = task_data.completed

        updated = self.repository.save(task)
        logger.info(f"Updated task {task_id}")
        return updated

    def delete_task(self, task_id: int) -> None:
        self.repository.delete_by_id(task_id)
        logger.info(f"Deleted task {task_id}")
