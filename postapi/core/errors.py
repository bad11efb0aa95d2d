"""Domain errors raised by services and mapped to HTTP responses in main."""


class PostApiError(Exception):
    """Base class for errors that end a request with a client-facing status."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInput(PostApiError):
    """A required field is missing, empty or whitespace-only."""

    status_code = 400


class AlreadyExists(PostApiError):
    """The username is already taken."""

    status_code = 400


class Unauthenticated(PostApiError):
    """Missing or unknown bearer token, or bad credentials."""

    status_code = 401


class Forbidden(PostApiError):
    """Authenticated, but not the owner of the resource."""

    status_code = 403


class NotFound(PostApiError):
    """The referenced post does not exist."""

    status_code = 404
