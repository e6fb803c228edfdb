"""Domain errors raised by the service layer and translated to HTTP status codes by the routes."""


class ServiceError(Exception):
    """Base class for expected failures of a service operation."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInputError(ServiceError):
    """Required fields are missing or blank."""


class ConflictError(ServiceError):
    """The operation would violate a uniqueness constraint (e.g. duplicate username)."""


class NotFoundError(ServiceError):
    """No row matched, or an update did not affect exactly one row."""


class PersistenceError(ServiceError):
    """The database reported an unexpected result for a write."""
