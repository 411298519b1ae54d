"""Business layer for the Task API."""
from .task_service import TaskService

__all__ = ["TaskService"]
