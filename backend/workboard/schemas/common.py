"""
Workboard Backend: Shared Response Schemas
============================================

What:  Pydantic models for bodies that are not tied to one resource:
       error payloads, confirmation messages, the health report, and the
       OpenAPI request-body helper used by the resource routes.
"""

from typing import Any, Dict, Type

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Body of every 500 response and of employee 404 responses.

    Example:
        {"error": "NOT NULL constraint failed: employees.email"}
    """
    error: str = Field(description="Error message (database errors are passed through verbatim)")


class MessageResponse(BaseModel):
    """Plain confirmation, e.g. {"message": "Employee updated"}."""
    message: str = Field(description="Human-readable result")


class HealthResponse(BaseModel):
    """Health check response showing service and storage status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


def json_request_body(model: Type[BaseModel]) -> Dict[str, Any]:
    """
    openapi_extra fragment declaring `model` as the JSON request body.

    Used by routes that read their body through a dependency instead of a
    typed parameter, so the docs still show the expected fields.
    """
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }
