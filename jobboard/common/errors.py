"""Error types raised by the jobboard data-access layer.

Each error carries the HTTP status code the API layer should answer with.
Errors coming from psycopg2 are not wrapped here; they propagate unchanged.
"""


class JobBoardError(Exception):
    """Base class for errors the API layer knows how to report."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(JobBoardError):
    """Raised when a caller supplies unusable input (e.g. an empty update)."""

    status_code = 400


class DuplicateEntityError(JobBoardError):
    """Raised when a create would break an application-level uniqueness rule."""

    status_code = 400


class NotFoundError(JobBoardError):
    """Raised when the requested record does not exist."""

    status_code = 404
