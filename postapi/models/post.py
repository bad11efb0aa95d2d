"""ORM model for blog posts."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from postapi.models.base import Base, UTCDateTime, utcnow


class Post(Base):
    """A post owned by exactly one user; only the author may change it."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(1024), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(UTCDateTime, nullable=False, default=utcnow)

    author = relationship("User", back_populates="posts")

    def __repr__(self) -> str:
        return f"<Post id={self.id} author_id={self.author_id}>"
