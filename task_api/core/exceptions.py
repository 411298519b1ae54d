"""
Error types raised by the Task API business layer.
"""


class TaskApiError(Exception):
    """Base class for Task API errors"""


class TaskNotFoundError(TaskApiError):
    """Raised when no task exists for the requested id"""

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id
