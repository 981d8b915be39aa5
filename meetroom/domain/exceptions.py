"""
Domain-specific exception hierarchy for the meetroom application.
"""

from typing import Iterable, List


class MeetroomError(Exception):
    """Base class for all application-level errors."""


class ValidationError(MeetroomError):
    """
    Raised when a request breaks one or more business rules.

    Carries every violated rule so callers can render all problems at once.
    """

    def __init__(self, messages: Iterable[str]):
        self.messages: List[str] = list(messages)
        super().__init__("; ".join(self.messages))


class NotFoundError(MeetroomError):
    """Raised when a room or participant lookup finds nothing."""


class ConflictError(MeetroomError):
    """Raised when a participant name is already taken in a room."""


class AuthorizationError(MeetroomError):
    """Raised when a participant tries to change a record that is not theirs."""


class RepositoryError(MeetroomError):
    """Raised when persisted room data cannot be read."""
