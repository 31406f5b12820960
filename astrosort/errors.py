"""Errors raised by the reorganization engine.

Filesystem failures are not wrapped: they surface as the builtin ``OSError``
family with the original cause intact.
"""


class AstroSortError(Exception):
    """Base class for errors the engine raises itself."""


class ValidationError(AstroSortError):
    """The supplied path does not exist."""


class UserCancelledError(AstroSortError):
    """The operator declined a confirmation gate."""

    def __init__(self, message: str = "Canceled by user."):
        super().__init__(message)
