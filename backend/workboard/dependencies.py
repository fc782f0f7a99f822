"""
FastAPI dependencies shared by the resource routers.

Repositories:
    The application factory stores one repository per resource on app.state;
    route handlers ask for them with Depends() so tests can swap them through
    app.dependency_overrides.

Request bodies:
    read_json_body() stands in for FastAPI's model-based body parsing. A body
    is only parsed when it is declared as JSON; anything else (no body, a
    text/plain body, a JSON array) counts as an empty object. The handlers
    forward whatever fields they got, and missing ones fail at the NOT NULL
    constraints as a storage error. Syntactically broken JSON is the one body
    rejected up front (400).

Path ids:
    Ids arrive as raw path segments. parse_row_id() turns a segment that is
    not an integer into None, and the routers answer it exactly like an id
    that matches no row.
"""

from typing import Any, Dict, Optional

from fastapi import Request

from workboard.exceptions import MalformedBodyError
from workboard.services.repository import ResourceRepository


def get_employee_repository(request: Request) -> ResourceRepository:
    return request.app.state.employee_repository


def get_task_repository(request: Request) -> ResourceRepository:
    return request.app.state.task_repository


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_json_body(request: Request) -> Dict[str, Any]:
    """
    The request's JSON object, or {} when there is none.

    Raises:
        MalformedBodyError: Declared as JSON but not parseable
    """
    if not _is_json(request.headers.get("content-type", "")):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        body = await request.json()
    except ValueError as e:
        raise MalformedBodyError(message=f"Malformed JSON body: {e}") from e

    return body if isinstance(body, dict) else {}


def parse_row_id(raw: str) -> Optional[int]:
    """Integer id from a path segment; None when the segment is not one."""
    try:
        return int(raw)
    except ValueError:
        return None
