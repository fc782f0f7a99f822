"""
Workboard Backend: Task Request/Response Schemas
==================================================

What:  API contract for /tasks. Same payload rules as employees: TaskPayload
       only documents the body, and missing fields are left for the
       database to reject.
"""

from typing import Optional

from pydantic import BaseModel, Field


class TaskPayload(BaseModel):
    """Body of POST /tasks and PUT /tasks/{id}."""

    name: Optional[str] = Field(default=None, description="The name of the task")
    description: Optional[str] = Field(default=None, description="The description of the task")
    assigned_to: Optional[str] = Field(default=None, description="The person assigned to the task")
    priority: Optional[str] = Field(default=None, description="The priority level of the task")
    status: Optional[str] = Field(default=None, description="The status of the task")
    deadline: Optional[str] = Field(default=None, description="The deadline of the task")


class TaskResponse(BaseModel):
    """
    A task as stored, or as echoed back by POST /tasks.

    POST echoes the request fields next to the new id rather than reading
    the row back.
    """

    id: int = Field(description="The auto-generated ID of the task")
    name: str
    description: str
    assigned_to: str
    priority: str
    status: str
    deadline: str


class TaskDeletedResponse(BaseModel):
    """DELETE /tasks/{id} reports how many rows went away (0 or 1)."""

    message: str = Field(default="Task deleted successfully")
    changes: int = Field(description="Affected-row count")
