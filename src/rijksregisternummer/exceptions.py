"""Custom exceptions with helpful error messages."""

from typing import Any


class RijksregisternummerError(Exception):
    """Base exception for rijksregisternummer errors."""

    pass


class InvalidRijksregisternummerError(RijksregisternummerError, ValueError):
    """Value is not a valid identification number of the National Register."""

    def __init__(self, value: str | None):
        self.value = value
        super().__init__(
            f"'{value}' is not a valid identification number of the National Register"
        )


class FallenError(RijksregisternummerError):
    """A value fell through all recognised cases.

    Raised when a month band or category is outside the closed set of known
    values. This is a programming error (decoding a number that never passed
    validation, or an unknown category), not a user input error.
    """

    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value
        super().__init__(f"Unexpected value for '{name}': {value!r}")
