"""
Thoughts API — Shared Schemas
===============================

What:  Response models used across routers: error body, health, API index.
Why:   Clients get one error shape from every endpoint, and OpenAPI docs
       describe it once.

Wire format:
    Field names are camelCase on the wire (`createdAt`, `accessToken`,
    `totalPages`) and snake_case in Python. `ApiModel` configures that once
    through Pydantic's alias generator; FastAPI serializes response models
    by alias.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for every schema that crosses the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "forbidden",
            "message": "Not your thought to edit",
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class EndpointInfo(ApiModel):
    path: str
    methods: List[str]


class ApiIndexResponse(ApiModel):
    """Returned by GET /: a greeting plus every mounted route."""
    message: str
    version: str
    endpoints: List[EndpointInfo]


class HealthResponse(ApiModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
