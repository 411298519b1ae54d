"""
Task storage: the repository interface and its implementations.
"""
import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.task import Task

logger = logging.getLogger(__name__)


class TaskRepository(ABC):
    """Abstraction over the task store."""

    @abstractmethod
    def find_all(self) -> List[Task]:
        """Return every stored task."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, task_id: int) -> Optional[Task]:
        """Return the task with the given id or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def save(self, task: Task) -> Task:
        """
        Persist a task and return the stored record.

        A task without an id is inserted and assigned a new one; a task
        with an id overwrites the stored record.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, task_id: int) -> None:
        """Delete the task if present. Missing ids are ignored."""
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, task_id: int) -> bool:
        raise NotImplementedError


class SqlAlchemyTaskRepository(TaskRepository):
    """Task store backed by a SQLAlchemy session. Each write commits."""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Task]:
        return self.db.query(Task).order_by(Task.id).all()

    def find_by_id(self, task_id: int) -> Optional[Task]:
        return self.db.get(Task, task_id)

    def save(self, task: Task) -> Task:
        try:
            if task.id is None:
                self.db.add(task)
            else:
                task = self.db.merge(task)
            self.db.commit()
            self.db.refresh(task)
            return task
        except SQLAlchemyError as e:
            logger.error(f"Error saving task: {e}")
            self.db.rollback()
            raise

    def delete_by_id(self, task_id: int) -> None:
        task = self.find_by_id(task_id)
        if task is None:
            logger.debug(f"Delete of missing task {task_id} ignored")
            return

        try:
            self.db.delete(task)
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error deleting task {task_id}: {e}")
            self.db.rollback()
            raise

    def exists_by_id(self, task_id: int) -> bool:
        return self.db.query(Task.id).filter(Task.id == task_id).first() is not None


class InMemoryTaskRepository(TaskRepository):
    """
    Task store kept in a dict, safe to share between threads.

    Callers always receive copies, never the stored instances.
    """

    def __init__(self):
        self._tasks: Dict[int, Task] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def find_all(self) -> List[Task]:
        with self._lock:
            return [task.copy() for task in self._tasks.values()]

    def find_by_id(self, task_id: int) -> Optional[Task]:
        with self._lock:
            task = self._tasks.get(task_id)
            return task.copy() if task is not None else None

    def save(self, task: Task) -> Task:
        with self._lock:
            stored = task.copy()
            if stored.id is None:
                stored.id = self._next_id
                self._next_id += 1
            elif stored.id >= self._next_id:
                self._next_id = stored.id + 1
            self._tasks[stored.id] = stored
            return stored.copy()

    def delete_by_id(self, task_id: int) -> None:
        with self._lock:
            self._tasks.pop(task_id, None)

    def exists_by_id(self, task_id: int) -> bool:
        with self._lock:
            return task_id in self._tasks
