"""Errors raised by the service layer and translated into responses by the API."""


class VotingError(Exception):
    """Base class for every service-layer failure."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(VotingError):
    """
    One or more input fields are missing or malformed.

    `errors` maps each offending field to the list of its messages, so every
    failing field is reported at once.
    """

    def __init__(self, message: str, errors: dict[str, list[str]]):
        super().__init__(message)
        self.errors = errors


class AuthenticationError(VotingError):
    """Credentials do not match. Deliberately silent about which part was wrong."""


class NotFoundError(VotingError):
    """The referenced record is absent or already soft-deleted."""


class PersistenceError(VotingError):
    """The store rejected the operation or is unavailable."""
