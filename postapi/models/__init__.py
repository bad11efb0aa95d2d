"""SQLAlchemy ORM models."""

from postapi.models.base import Base
from postapi.models.post import Post
from postapi.models.user import User

__all__ = ["Base", "Post", "User"]
