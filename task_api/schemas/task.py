"""
Pydantic schemas for the Task API.
"""
from typing import Optional
from pydantic import BaseModel, Field


class TaskBase(BaseModel):
    """Base task schema"""
    title: Optional[str] = Field(None, description="Task title")
    description: Optional[str] = Field(None, description="Task description")
    completed: bool = Field(False, description="Whether the task is done")


class TaskCreate(TaskBase):
    """Schema for creating a task; a client-supplied id is ignored"""
    pass


class TaskUpdate(TaskBase):
    """Schema for replacing the fields of an existing task"""
    pass


class TaskResponse(TaskBase):
    """Schema for task response"""
    id: Optional[int] = Field(None, description="Task ID")

    class Config:
        from_attributes = True
