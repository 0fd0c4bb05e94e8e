"""
Exception classes related to persistence operations.

This module defines exceptions raised during database and repository operations.
"""

from patient_records.domain.exceptions.base_exceptions import BaseApplicationError


class PersistenceError(BaseApplicationError):
    """Base class for persistence-related exceptions."""

    def __init__(
        self,
        message: str = "Persistence operation failed",
        original_exception: Exception | None = None,
    ):
        super().__init__(message)
        self.original_exception = original_exception


class RepositoryError(PersistenceError):
    """Raised when a repository or unit of work operation fails."""

    def __init__(
        self,
        message: str = "Repository operation failed",
        repository: str | None = None,
        operation: str | None = None,
        original_exception: Exception | None = None,
    ):
        if repository and operation:
            message = f"{message} in {repository} during {operation}"
        elif repository:
            message = f"{message} in {repository}"
        super().__init__(message, original_exception=original_exception)
        self.repository = repository
        self.operation = operation


class UnitOfWorkDisposedError(RepositoryError):
    """Raised when a unit of work is used after it has been closed."""

    def __init__(self, message: str = "Unit of work has been disposed"):
        super().__init__(message)


class MappingNotRegisteredError(RepositoryError):
    """Raised when no persistence mapping exists for an entity type."""

    def __init__(self, entity_type: type):
        super().__init__(f"No persistence mapping registered for {entity_type.__name__}")
        self.entity_type = entity_type
