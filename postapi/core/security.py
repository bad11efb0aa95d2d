"""Password hashing, bearer token generation and bearer credential cleanup."""

import secrets

import bcrypt

from postapi.core.config import settings

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=rounds if rounds is not None else settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash (constant-time compare)."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def generate_token(nbytes: int | None = None) -> str:
    """Return a new opaque bearer token: random bytes rendered as hex."""
    return secrets.token_hex(nbytes if nbytes is not None else settings.TOKEN_BYTES)


def clean_bearer_credentials(credentials: str | None) -> str | None:
    """
    Normalize the credential part of ``Authorization: Bearer <token>``.

    HTTPBearer keeps whatever follows the first space, so extra whitespace
    around the token is stripped here. Blank credentials count as missing.
    """
    if credentials is None:
        return None
    return credentials.strip() or None
