"""
Workboard Backend: Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the failures the API reports.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with the matching HTTP status code.
Who:   StorageError is raised by ResourceRepository, NotFoundError by routers,
       MalformedBodyError by the JSON body dependency.

Exception Hierarchy:
    WorkboardError (base)
    ├── MalformedBodyError  → 400 Bad Request
    ├── NotFoundError       → 404 Not Found
    └── StorageError        → 500 Internal Server Error

Incomplete input has no exception of its own. A payload with missing fields is
forwarded to the database and comes back as a StorageError (NOT NULL
constraint failed), which is what clients see.
"""

from typing import Any, Dict, Optional


class WorkboardError(Exception):
    """
    Base exception for all Workboard application errors.

    Attributes:
        message:  Error description returned in the API response
        context:  Additional debug info (logged, not returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class MalformedBodyError(WorkboardError):
    """
    Raised when a body declared as application/json does not parse.

    HTTP:    400 Bad Request

    This is a parsing failure, not validation: a well-formed body with
    missing or oddly typed fields is never rejected here.
    """

    def __init__(
        self,
        message: str = "Malformed JSON body",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(WorkboardError):
    """
    Raised when a requested row does not exist.

    When:    Employee update/delete affected zero rows, or a task lookup
             returned nothing.
    HTTP:    404 Not Found

    The two resources report this differently: employee routes answer
    {"error": "Employee not found"} while the task route answers
    {"message": "Task not found"}. `body_key` selects which key the handler
    writes the message under.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[int] = None,
        body_key: str = "error",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.body_key = body_key


class StorageError(WorkboardError):
    """
    Raised when the database rejects or fails a statement.

    What:    Constraint violation, missing table, I/O failure, malformed SQL.
    HTTP:    500 Internal Server Error

    The message is the driver's own text (e.g. "NOT NULL constraint failed:
    employees.email") and is returned to the client unchanged.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
