"""
Exception classes related to persistence operations.

This module defines exceptions raised during database and repository operations.
"""

from naretbox.domain.exceptions.base_exceptions import BaseApplicationError


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
    """Raised when a repository operation fails."""

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
        super().__init__(message, original_exception)
        self.repository = repository
        self.operation = operation
