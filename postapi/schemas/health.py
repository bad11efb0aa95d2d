"""Pydantic schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service status plus the state of the users/posts store."""

    status: Literal["ok", "degraded"] = Field(
        default="ok", description="'degraded' when the database or a table is unavailable"
    )
    environment: str = Field(description="Current app environment (dev or prod)")
    database: Literal["connected", "disconnected"]
    tables: dict[str, bool] = Field(
        default_factory=dict, description="Whether each store table (users, posts) exists"
    )
    posts: int | None = Field(default=None, description="Number of stored posts, when readable")
