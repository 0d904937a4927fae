"""
Pydantic schemas shared by every router.

Field names are snake_case in Python and camelCase on the wire.
No business logic belongs here.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorDetail(BaseModel):
    """Machine-readable code and user-facing message of an error."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    """Envelope returned for every failed request."""

    success: bool = False
    error: ErrorDetail


class HealthResponse(CamelModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    uptime_seconds: float
    timestamp: datetime
