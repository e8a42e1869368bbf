"""API response models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Serializes field names in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime


class StatusResponse(_CamelModel):
    """Static payload served at the root path."""

    success: bool = True
    message: str
    endpoints: dict[str, str]


class CheckSuccessResponse(_CamelModel):
    """Expiration of a domain that was found."""

    success: Literal[True] = True
    domain_name: str
    expiration_date: str = Field(description="Expiration date as YYYY-MM-DD (UTC)")
    expiration_date_thai: str = Field(description="Localized expiration date and time")
    message: str


class ErrorResponse(_CamelModel):
    """Failed domain check."""

    success: Literal[False] = False
    domain_name: str | None = None
    error: str
    searched_domain: str | None = Field(default=None, description="Domain as it was searched")
    normalized_domain: str | None = Field(default=None, description="Normalized form, if any")
