"""Persistence boundary for the Task API."""
from .task_repository import (
    TaskRepository,
    SqlAlchemyTaskRepository,
    InMemoryTaskRepository,
)

__all__ = ["TaskRepository", "SqlAlchemyTaskRepository", "InMemoryTaskRepository"]
