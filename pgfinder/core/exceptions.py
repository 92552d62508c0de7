"""PG Finder exception taxonomy.

Every application error inherits from :class:`PGFinderError` and carries the
HTTP status the API answers with::

    PGFinderError
    ├── ValidationError      400
    ├── InvalidCredentials   401
    ├── Unauthorized         401
    ├── Forbidden            403
    ├── NotFound             404
    ├── ConflictError        409
    └── InternalError        500

The exception handler registered in :mod:`pgfinder.main` renders them as
``{"message": str(exc)}``.
"""

__all__ = [
    "PGFinderError",
    "ValidationError",
    "InvalidCredentials",
    "Unauthorized",
    "Forbidden",
    "NotFound",
    "ConflictError",
    "InternalError",
]


class PGFinderError(Exception):
    """Root exception for all PG Finder errors."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class ValidationError(PGFinderError):
    status_code = 400
    default_message = "Invalid request"


class InvalidCredentials(PGFinderError):
    """Login failed. Does not say whether the email or the password was wrong."""

    status_code = 401
    default_message = "Invalid credentials"


class Unauthorized(PGFinderError):
    """Token missing, malformed, expired or with a bad signature."""

    status_code = 401
    default_message = "Invalid or expired token"


class Forbidden(PGFinderError):
    status_code = 403
    default_message = "Access denied"


class NotFound(PGFinderError):
    status_code = 404
    default_message = "Not found"


class ConflictError(PGFinderError):
    status_code = 409
    default_message = "Already exists"


class InternalError(PGFinderError):
    status_code = 500
