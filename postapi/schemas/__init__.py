"""Pydantic request/response schemas."""

from postapi.schemas.auth import Credentials, CurrentUser, TokenResponse
from postapi.schemas.health import HealthResponse
from postapi.schemas.post import (
    MessageResponse,
    PostCreate,
    PostCreatedResponse,
    PostOut,
    PostUpdate,
)

__all__ = [
    "Credentials",
    "CurrentUser",
    "HealthResponse",
    "MessageResponse",
    "PostCreate",
    "PostCreatedResponse",
    "PostOut",
    "PostUpdate",
    "TokenResponse",
]
