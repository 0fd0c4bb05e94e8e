"""
Base exception classes for the application.

This module defines base exception classes that are extended by other
exception classes in the application.
"""


class BaseApplicationError(Exception):
    """Base class for all application exceptions."""

    def __init__(self, message: str = "An application error occurred") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(BaseApplicationError):
    """Error raised when validation fails."""

    def __init__(self, message: str = "Validation failed") -> None:
        super().__init__(message)


class InvalidArgumentError(BaseApplicationError):
    """Error raised when a caller passes a structurally invalid request."""

    def __init__(self, message: str = "Invalid argument", argument: str | None = None) -> None:
        if argument:
            message = f"{message}: {argument}"
        super().__init__(message)
        self.argument = argument


class OperationCancelledError(BaseApplicationError):
    """Error raised when the caller withdrew interest before the operation ran."""

    def __init__(self, message: str = "The operation was cancelled") -> None:
        super().__init__(message)

