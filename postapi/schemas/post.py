"""Pydantic schemas for post endpoints. Wire format uses camelCase keys."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class PostCreate(BaseModel):
    """Body for POST /posts. Blank fields are rejected by the service with 400."""

    title: str | None = Field(default=None, description="Post title")
    content: str | None = Field(default=None, description="Post body")


class PostUpdate(BaseModel):
    """Body for PATCH /posts/{id}. Absent or blank fields are left unchanged."""

    title: str | None = None
    content: str | None = None


class PostOut(BaseModel):
    """Public representation of a post.

    The owner is emitted as `authorId`, and again as `userId` for clients
    written against the older field name.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    author_id: int
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    @computed_field(alias="userId")
    @property
    def user_id(self) -> int:
        return self.author_id


class PostCreatedResponse(BaseModel):
    """Response for POST /posts."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    post_id: int


class MessageResponse(BaseModel):
    """Plain acknowledgement for delete and update."""

    message: str
