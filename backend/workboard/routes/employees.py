"""
Workboard Backend: Employee Route Handlers
============================================

What:  GET/POST /employees and PUT/DELETE /employees/{id}.
How:   Each handler makes one repository call and maps the outcome to a
       status code. StorageError propagates to the global handler (500).

There is no GET /employees/{id}. A request for it falls through to the
routing layer's 404 (see main.register_exception_handlers).

Update and delete treat "zero rows affected" as not found. An id segment
that is not an integer cannot match a row, so it gets the same 404.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from workboard.dependencies import get_employee_repository, parse_row_id, read_json_body
from workboard.exceptions import NotFoundError
from workboard.schemas.common import ErrorResponse, MessageResponse, json_request_body
from workboard.schemas.employee import (
    EmployeeCreatedResponse,
    EmployeePayload,
    EmployeeResponse,
)
from workboard.services.repository import ResourceRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["Employees"])

SERVER_ERROR = {500: {"description": "Database error", "model": ErrorResponse}}
NOT_FOUND = {404: {"description": "Employee not found", "model": ErrorResponse}}
EMPLOYEE_BODY = json_request_body(EmployeePayload)


@router.get(
    "",
    response_model=List[EmployeeResponse],
    responses=SERVER_ERROR,
    summary="Retrieve a list of employees",
)
async def list_employees(
    repository: ResourceRepository = Depends(get_employee_repository),
) -> List[Dict[str, Any]]:
    return await repository.list_all()


@router.post(
    "",
    status_code=201,
    response_model=EmployeeCreatedResponse,
    responses=SERVER_ERROR,
    openapi_extra=EMPLOYEE_BODY,
    summary="Create a new employee",
)
async def create_employee(
    fields: Dict[str, Any] = Depends(read_json_body),
    repository: ResourceRepository = Depends(get_employee_repository),
) -> EmployeeCreatedResponse:
    """Insert the employee and return only the identifier storage assigned."""
    new_id = await repository.create(fields)
    logger.info("Employee %d created", new_id)
    return EmployeeCreatedResponse(id=new_id)


@router.put(
    "/{employee_id}",
    response_model=MessageResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
    openapi_extra=EMPLOYEE_BODY,
    summary="Update an existing employee",
)
async def update_employee(
    employee_id: str,
    fields: Dict[str, Any] = Depends(read_json_body),
    repository: ResourceRepository = Depends(get_employee_repository),
) -> MessageResponse:
    """
    Overwrite all fields of the employee.

    Fields omitted from the body are written as NULL, which the table
    rejects, so a partial body fails with 500 rather than patching.
    """
    row_id = parse_row_id(employee_id)
    changes = await repository.update(row_id, fields) if row_id is not None else 0
    if changes == 0:
        raise NotFoundError(resource="Employee", resource_id=row_id)
    return MessageResponse(message="Employee updated")


@router.delete(
    "/{employee_id}",
    response_model=MessageResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Delete an employee",
)
async def delete_employee(
    employee_id: str,
    repository: ResourceRepository = Depends(get_employee_repository),
) -> MessageResponse:
    row_id = parse_row_id(employee_id)
    changes = await repository.delete(row_id) if row_id is not None else 0
    if changes == 0:
        raise NotFoundError(resource="Employee", resource_id=row_id)
    logger.info("Employee %d deleted", row_id)
    return MessageResponse(message="Employee deleted")
