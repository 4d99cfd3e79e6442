"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    database: Literal["connected", "disconnected"] | None = Field(
        default=None,
        description="Report store connectivity when the check is performed",
    )
    webhook_configured: bool = Field(
        default=False,
        description="Whether WEBHOOK_API_KEY is set (intake returns 401 otherwise)",
    )
