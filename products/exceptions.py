"""
Custom exception classes for the products app.

This module defines specific exception types for better error handling
and more informative error messages throughout the application.
"""


class ProductsBaseException(Exception):
    """Base exception class for all products app exceptions."""
    pass


class InvalidArgumentError(ProductsBaseException, ValueError):
    """Raised when a vote count is negative, non-finite or not an integer."""

    def __init__(self, value, argument="count", reason=None):
        self.value = value
        self.argument = argument
        self.reason = reason
        message = f"Invalid {argument}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class VoteTierConfigError(ProductsBaseException):
    """Raised when the popularity tier table has no tier for a vote count."""

    def __init__(self, count):
        self.count = count
        message = f"No popularity tier covers {count} votes"
        super().__init__(message)
