"""Post repository: persistence plus author-only mutation."""

import logging
from datetime import timedelta

from sqlalchemy.orm import Session

from postapi.core.errors import Forbidden, InvalidInput, NotFound
from postapi.models import Post
from postapi.models.base import utcnow

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def create_post(db: Session, author_id: int, title: str | None, content: str | None) -> Post:
    """Persist a new post for author_id. Title and content must be non-blank."""
    if _is_blank(title) or _is_blank(content):
        raise InvalidInput("Title and content are required")

    now = utcnow()
    post = Post(
        author_id=author_id,
        title=title,
        content=content,
        created_at=now,
        updated_at=now,
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info("Post created", extra={"post_id": post.id, "author_id": author_id})
    return post


def get_post(db: Session, post_id: int) -> Post:
    post = db.query(Post).filter(Post.id == post_id).first()
    if post is None:
        raise NotFound("Post not found")
    return post


def list_posts(db: Session) -> list[Post]:
    """All posts, newest first."""
    return db.query(Post).order_by(Post.created_at.desc(), Post.id.desc()).all()


def _get_owned(db: Session, post_id: int, requester_id: int) -> Post:
    # Existence is checked before ownership: a missing post is 404 for everyone.
    post = get_post(db, post_id)
    if post.author_id != requester_id:
        logger.warning(
            "Ownership check failed",
            extra={"post_id": post_id, "author_id": post.author_id, "requester_id": requester_id},
        )
        raise Forbidden("You are not the author of this post")
    return post


def delete_post(db: Session, post_id: int, requester_id: int) -> None:
    post = _get_owned(db, post_id, requester_id)
    db.delete(post)
    db.commit()
    logger.info("Post deleted", extra={"post_id": post_id, "author_id": requester_id})


def update_post(
    db: Session,
    post_id: int,
    requester_id: int,
    title: str | None = None,
    content: str | None = None,
) -> bool:
    """
    Apply the non-blank fields to the post and return whether anything changed.

    updated_at moves only when a value actually differs, and always moves
    forward even if the clock has not ticked since the last write.
    """
    post = _get_owned(db, post_id, requester_id)

    changed = False
    if not _is_blank(title) and title != post.title:
        post.title = title
        changed = True
    if not _is_blank(content) and content != post.content:
        post.content = content
        changed = True

    if not changed:
        return False

    now = utcnow()
    if now <= post.updated_at:
        now = post.updated_at + timedelta(microseconds=1)
    post.updated_at = now
    db.commit()
    logger.info("Post updated", extra={"post_id": post_id, "author_id": requester_id})
    return True
