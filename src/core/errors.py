"""
RouletteBot - Error Types
=========================

Errors raised by the roulette service. Each carries the message shown
to the user when the command boundary converts it to a reply.

Author: حَـــــنَّـــــا
"""


class RouletteError(Exception):
    """Base error for roulette operations."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(RouletteError):
    """Empty or malformed input."""
    pass


class NotFoundError(RouletteError):
    """Referenced roulette id or group name does not exist."""
    pass


class ConflictError(RouletteError):
    """A roulette group with the same name already exists."""
    pass


__all__ = ["RouletteError", "ValidationError", "NotFoundError", "ConflictError"]
