"""ORM model for registered users and their current bearer token."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from postapi.models.base import Base


class User(Base):
    """
    User account for bearer token authentication.

    token: the single active session credential; replaced on every login.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    token = Column(String(128), nullable=True, unique=True, index=True)

    posts = relationship("Post", back_populates="author")

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r}>"
