"""
Workboard Backend: Task Route Handlers
========================================

What:  Full CRUD for /tasks, including GET /tasks/{id}.

Behaviour that differs from the employee routes:
    - POST echoes the submitted fields next to the new id
    - PUT never checks the affected-row count; it always reads the row back
      and returns it, which is JSON null when the id does not exist
    - DELETE always answers 200 and reports the affected-row count in
      `changes` (0 when nothing was deleted)
    - GET /tasks/{id} reports a missing task as {"message": "Task not found"}

A non-integer id behaves like an id with no row behind it: 404 on GET,
null on PUT, `changes: 0` on DELETE.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from workboard.dependencies import get_task_repository, parse_row_id, read_json_body
from workboard.exceptions import NotFoundError
from workboard.models.task import TASK_FIELDS
from workboard.schemas.common import ErrorResponse, MessageResponse, json_request_body
from workboard.schemas.task import TaskDeletedResponse, TaskPayload, TaskResponse
from workboard.services.repository import ResourceRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["Tasks"])

SERVER_ERROR = {500: {"description": "Database error", "model": ErrorResponse}}
TASK_BODY = json_request_body(TaskPayload)


@router.get(
    "",
    response_model=List[TaskResponse],
    responses=SERVER_ERROR,
    summary="Retrieve a list of tasks",
)
async def list_tasks(
    repository: ResourceRepository = Depends(get_task_repository),
) -> List[Dict[str, Any]]:
    return await repository.list_all()


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    responses={
        404: {"description": "Task not found", "model": MessageResponse},
        **SERVER_ERROR,
    },
    summary="Retrieve a task by ID",
)
async def get_task(
    task_id: str,
    repository: ResourceRepository = Depends(get_task_repository),
) -> Dict[str, Any]:
    row_id = parse_row_id(task_id)
    task = await repository.get_by_id(row_id) if row_id is not None else None
    if task is None:
        raise NotFoundError(resource="Task", resource_id=row_id, body_key="message")
    return task


@router.post(
    "",
    status_code=201,
    response_model=None,
    responses={
        201: {"description": "The new id and the submitted fields", "model": TaskResponse},
        **SERVER_ERROR,
    },
    openapi_extra=TASK_BODY,
    summary="Create a new task",
)
async def create_task(
    fields: Dict[str, Any] = Depends(read_json_body),
    repository: ResourceRepository = Depends(get_task_repository),
) -> Dict[str, Any]:
    """
    Insert the task and echo the request.

    The echo is the submitted JSON values, not the stored text, so
    `"priority": true` comes back as true even though the row holds "1".
    """
    new_id = await repository.create(fields)
    logger.info("Task %d created", new_id)
    return {"id": new_id, **{name: fields.get(name) for name in TASK_FIELDS}}


@router.put(
    "/{task_id}",
    response_model=Optional[TaskResponse],
    responses=SERVER_ERROR,
    openapi_extra=TASK_BODY,
    summary="Update a task by ID",
)
async def update_task(
    task_id: str,
    fields: Dict[str, Any] = Depends(read_json_body),
    repository: ResourceRepository = Depends(get_task_repository),
) -> Optional[Dict[str, Any]]:
    """Overwrite the task, then return whatever is stored under the id."""
    row_id = parse_row_id(task_id)
    if row_id is None:
        return None
    await repository.update(row_id, fields)
    return await repository.get_by_id(row_id)


@router.delete(
    "/{task_id}",
    response_model=TaskDeletedResponse,
    responses=SERVER_ERROR,
    summary="Delete a task by ID",
)
async def delete_task(
    task_id: str,
    repository: ResourceRepository = Depends(get_task_repository),
) -> TaskDeletedResponse:
    row_id = parse_row_id(task_id)
    changes = await repository.delete(row_id) if row_id is not None else 0
    if changes:
        logger.info("Task %d deleted", row_id)
    return TaskDeletedResponse(message="Task deleted successfully", changes=changes)
