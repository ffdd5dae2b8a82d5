class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    """A field is missing, malformed, or cannot be normalized."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class MissingReferenceError(NotFoundError):
    """A record points at another record that does not exist."""


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class UniquenessError(ConflictError):
    """The storage layer rejected a write because of a unique index."""
