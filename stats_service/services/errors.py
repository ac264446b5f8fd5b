"""Exceptions raised while parsing and computing statistics.

Everything here derives from :class:`StatsServiceError`, which the app's
exception handler turns into a 400 response.
"""
from __future__ import annotations

__all__: list[str] = [
    "StatsServiceError",
    "ParseError",
    "EmptyInputError",
    "StatisticsError",
]


class StatsServiceError(Exception):
    """Base class for client-visible failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParseError(StatsServiceError):
    """A token in the ``nums`` list is not a number.

    Attributes:
        token: The offending token, exactly as received.
    """

    def __init__(self, token: str):
        super().__init__(f"{token} is not a number.")
        self.token = token


class EmptyInputError(StatsServiceError):
    """Statistics were requested for an empty sequence."""

    def __init__(self):
        super().__init__("at least one number is required.")


class StatisticsError(StatsServiceError):
    """A statistic could not be represented as a finite number."""

    def __init__(self, operation: str):
        super().__init__(f"{operation} is out of range.")
        self.operation = operation
