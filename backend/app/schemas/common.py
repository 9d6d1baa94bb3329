"""
Rodrise School Management Backend — Shared Schemas
===================================================

What:  Base model with camelCase aliases plus the error and health responses.
Why:   Every endpoint emits the same key style (`isActive`, `createdAt`) and
       the same error envelope (`{"error": ...}`).
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for all API schemas.

    - alias_generator: snake_case fields are read and written as camelCase
    - populate_by_name: services can still build instances with snake_case kwargs
    - from_attributes: responses validate straight from ORM objects
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """
    What:  Error envelope returned by every failing request.

    Example:
        {"error": "Class with this name and level already exists"}
        {"error": "Validation error", "details": [{"field": "name", "message": "..."}]}
    """
    error: str = Field(description="Human-readable error message")
    details: Optional[List[Dict[str, Any]]] = Field(
        default=None,
        description="Field-level validation problems, when available",
    )


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and load balancer health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


class Pagination(CamelModel):
    """Paging block of the student and payment listings."""
    page: int
    limit: int
    total: int
    pages: int
