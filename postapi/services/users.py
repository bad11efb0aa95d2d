"""Credential store and the register/login flows built on it."""

import logging
from functools import lru_cache

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from postapi.core.errors import AlreadyExists, InvalidInput, Unauthenticated
from postapi.core.security import generate_token, hash_password, verify_password
from postapi.models import User

logger = logging.getLogger(__name__)

BAD_CREDENTIALS_MESSAGE = "Invalid username or password."

USERNAME_MAX_LEN = 255


def create_user(db: Session, username: str, password_hash: str, token: str | None = None) -> User:
    """
    Insert a new user, optionally with its first token, in one commit. The UNIQUE
    index on username decides duplicates, so two concurrent registrations for
    the same name cannot both succeed.
    """
    user = User(username=username, password_hash=password_hash, token=token)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Registration rejected: username taken", extra={"username": username})
        raise AlreadyExists("User already exists") from e
    db.refresh(user)
    return user


def find_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def find_by_token(db: Session, token: str | None) -> User | None:
    if not token:
        return None
    return db.query(User).filter(User.token == token).first()


def set_token(db: Session, user_id: int, token: str) -> None:
    """Overwrite the user's token in a single UPDATE; the old token stops resolving."""
    db.query(User).filter(User.id == user_id).update(
        {User.token: token}, synchronize_session="fetch"
    )
    db.commit()


def resolve_token(db: Session, token: str | None) -> User | None:
    """Map a bearer token back to its user, or None if it is unknown or stale."""
    return find_by_token(db, token)


def issue_token(db: Session, user: User) -> str:
    """Generate a fresh token for the user and store it."""
    token = generate_token()
    set_token(db, user.id, token)
    return token


@lru_cache
def _dummy_hash() -> str:
    # Checked against when the username is unknown, so both login failures cost one bcrypt run.
    return hash_password(generate_token())


def _require(value: str | None) -> str:
    if value is None or not value.strip():
        raise InvalidInput("Username and password are required")
    return value


def register(db: Session, username: str | None, password: str | None) -> str:
    """Create an account and return its first bearer token. The user row and token are committed together."""
    username = _require(username)
    password = _require(password)
    if len(username) > USERNAME_MAX_LEN:
        raise InvalidInput(f"Username must be at most {USERNAME_MAX_LEN} characters")

    token = generate_token()
    user = create_user(db, username, hash_password(password), token=token)
    logger.info("User registered", extra={"user_id": user.id, "username": user.username})
    return token


def login(db: Session, username: str | None, password: str | None) -> str:
    """
    Check credentials and return a fresh token. Unknown user and wrong password
    produce the same error after the same amount of hashing work.
    """
    if not username or not password:
        raise Unauthenticated(BAD_CREDENTIALS_MESSAGE)

    user = find_by_username(db, username)
    if user is None:
        verify_password(password, _dummy_hash())
        logger.warning("Failed login attempt", extra={"username": username})
        raise Unauthenticated(BAD_CREDENTIALS_MESSAGE)
    if not verify_password(password, user.password_hash):
        logger.warning("Failed login attempt", extra={"username": username})
        raise Unauthenticated(BAD_CREDENTIALS_MESSAGE)

    token = issue_token(db, user)
    logger.info("Login successful", extra={"user_id": user.id, "username": user.username})
    return token
