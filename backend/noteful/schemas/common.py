"""
Noteful Backend — Shared Response Schemas
===========================================

What:  Error and health payloads shared by every router.
Why:   Clients parse one error shape regardless of the endpoint:
           {"error": {"message": "Folder doesn't exist"}}
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {"error": {"message": "Missing 'note_name' in request body"}}
    """
    error: ErrorDetail


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and load balancer health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
