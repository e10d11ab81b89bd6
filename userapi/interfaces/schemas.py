"""
Pydantic schemas shared by every router.

Includes the error envelope documented on each route and the
health probe response.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error envelope returned for every mapped failure."""

    code: str
    message: str
    developer_message: str


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
