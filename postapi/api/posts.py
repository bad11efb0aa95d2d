"""Post routes. Reads are public; create, update and delete require a bearer token."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from postapi.api.auth import get_current_user, query_or_body
from postapi.core.database import get_db
from postapi.schemas.auth import CurrentUser
from postapi.schemas.post import (
    MessageResponse,
    PostCreate,
    PostCreatedResponse,
    PostOut,
    PostUpdate,
)
from postapi.services import posts

router = APIRouter()


@router.post("", response_model=PostCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
    title: Annotated[str | None, Query()] = None,
    content: Annotated[str | None, Query()] = None,
    body: PostCreate | None = None,
) -> PostCreatedResponse:
    """
    Create a post owned by the caller. Title and content are required and come
    from the query string or a JSON body.
    """
    post = posts.create_post(
        db,
        user.id,
        query_or_body(title, body, "title"),
        query_or_body(content, body, "content"),
    )
    return PostCreatedResponse(message="Post created", post_id=post.id)


@router.get("", response_model=list[PostOut])
def list_posts(db: Annotated[Session, Depends(get_db)]) -> list[PostOut]:
    """List every post, newest first."""
    return [PostOut.model_validate(p) for p in posts.list_posts(db)]


@router.get("/{post_id}", response_model=PostOut)
def get_post(post_id: int, db: Annotated[Session, Depends(get_db)]) -> PostOut:
    return PostOut.model_validate(posts.get_post(db, post_id))


@router.patch("/{post_id}", response_model=MessageResponse)
def update_post(
    post_id: int,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
    title: Annotated[str | None, Query()] = None,
    content: Annotated[str | None, Query()] = None,
    body: PostUpdate | None = None,
) -> MessageResponse:
    """
    Change title and/or content of the caller's own post.
    Omitted or blank fields keep their current value.
    """
    posts.update_post(
        db,
        post_id,
        user.id,
        title=query_or_body(title, body, "title"),
        content=query_or_body(content, body, "content"),
    )
    return MessageResponse(message="Post updated")


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: int,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    """Delete the caller's own post."""
    posts.delete_post(db, post_id, user.id)
    return MessageResponse(message="Post deleted")
