"""Register/login routes and the bearer token auth dependency (get_current_user)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from sqlalchemy.orm import Session

from postapi.core.database import get_db
from postapi.core.errors import Unauthenticated
from postapi.core.security import clean_bearer_credentials
from postapi.schemas.auth import Credentials, CurrentUser, TokenResponse
from postapi.services import users

logger = logging.getLogger(__name__)

router = APIRouter()
security = HTTPBearer(auto_error=False)


def query_or_body(query_value: str | None, body: BaseModel | None, field: str) -> str | None:
    """Return the query parameter if given, else the same field from the JSON body."""
    if query_value is not None:
        return query_value
    if body is None:
        return None
    return getattr(body, field)


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    db: Annotated[Session, Depends(get_db)],
    username: Annotated[str | None, Query()] = None,
    password: Annotated[str | None, Query()] = None,
    body: Credentials | None = None,
) -> TokenResponse:
    """
    Create an account and return its bearer token.
    Credentials come from the query string (POST /register?username=...&password=...)
    or a JSON body. Include the token in the Authorization header as: Bearer <token>
    """
    token = users.register(
        db,
        query_or_body(username, body, "username"),
        query_or_body(password, body, "password"),
    )
    return TokenResponse(message="User registered successfully", token=token)


@router.post("/login", response_model=TokenResponse)
def login(
    db: Annotated[Session, Depends(get_db)],
    username: Annotated[str | None, Query()] = None,
    password: Annotated[str | None, Query()] = None,
    body: Credentials | None = None,
) -> TokenResponse:
    """
    Authenticate with username and password; returns a fresh bearer token.
    Any token issued earlier for the same user stops working.
    """
    token = users.login(
        db,
        query_or_body(username, body, "username"),
        query_or_body(password, body, "password"),
    )
    return TokenResponse(message="Login successful", token=token)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """Dependency: require a valid Bearer token and return the current user. Raises 401 otherwise."""
    token = clean_bearer_credentials(credentials.credentials if credentials else None)
    if token is None:
        logger.info("Rejected request without bearer token")
        raise Unauthenticated("Not authenticated")
    user = users.resolve_token(db, token)
    if user is None:
        logger.info("Rejected request with unknown or replaced token")
        raise Unauthenticated("Invalid token")
    return CurrentUser.model_validate(user)
