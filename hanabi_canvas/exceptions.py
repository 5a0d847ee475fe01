"""Exceptions related to hanabi-canvas."""

__all__ = [
    "HanabiException",
    "InputException",
]


class HanabiException(Exception):
    """Generic base exception used for this library."""


class InputException(HanabiException):
    """Raised when the input files or values are not formatted as expected."""
