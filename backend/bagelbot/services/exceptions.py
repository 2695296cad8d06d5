"""Base service exceptions.

These exceptions are raised by the service layer and should be caught
by the API layer and converted to appropriate HTTP responses.
"""


class ServiceError(Exception):
    """Base service exception."""

    pass


class NotFoundError(ServiceError):
    """Resource not found."""

    pass


class ValidationError(ServiceError):
    """Validation error."""

    pass


class UnauthorizedError(ServiceError):
    """Caller did not present a valid credential."""

    pass


class DatastoreError(ServiceError):
    """Underlying database query or connection failed.

    The original exception is chained as ``__cause__``; the message is meant for
    logs only and must not be returned to API clients.
    """

    pass
