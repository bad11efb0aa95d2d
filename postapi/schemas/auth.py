"""Request/response schemas for register and login."""

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """Optional JSON body for register and login.

    The same fields are accepted as query parameters, which take precedence.
    Both are optional at the schema level so that a missing field is reported
    by the service (400 on register, 401 on login) instead of a 422.
    """

    username: str | None = Field(default=None, description="Username")
    password: str | None = Field(default=None, description="Password")


class TokenResponse(BaseModel):
    """Opaque bearer token returned after registration or login."""

    message: str
    token: str = Field(..., description="Send as Authorization: Bearer <token>")


class CurrentUser(BaseModel):
    """Authenticated user (id, username) for dependency injection."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
