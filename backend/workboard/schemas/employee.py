"""
Workboard Backend: Employee Request/Response Schemas
======================================================

What:  API contract for /employees.
How:   EmployeePayload documents the request body in the OpenAPI schema;
       responses are serialized through the response models below.

Request bodies are not validated against EmployeePayload. The routers read
the raw JSON object (workboard.dependencies.read_json_body) and forward it,
so an incomplete payload still reaches the database, where the NOT NULL
constraints reject it (HTTP 500 with the driver message). Numbers and
booleans land in TEXT columns and are stored as text.
"""

from typing import Optional

from pydantic import BaseModel, Field


class EmployeePayload(BaseModel):
    """Body of POST /employees and PUT /employees/{id}."""

    name: Optional[str] = Field(default=None, examples=["Jane Smith"])
    email: Optional[str] = Field(default=None, examples=["jane@example.com"])
    phone: Optional[str] = Field(default=None, examples=["0987654321"])
    address: Optional[str] = Field(default=None, examples=["456 Oak Street"])
    joining_date: Optional[str] = Field(
        default=None,
        description="Date the employee joined (YYYY-MM-DD)",
        examples=["2019-05-15"],
    )


class EmployeeResponse(BaseModel):
    """One row of the employees table."""

    id: int
    name: str
    email: str
    phone: str
    address: str
    joining_date: str


class EmployeeCreatedResponse(BaseModel):
    """POST /employees answers with the new identifier only."""

    id: int = Field(description="Identifier assigned by storage")
