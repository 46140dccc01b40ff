"""
Custom application-specific exceptions.
"""

class BaseAppException(Exception):
    """Base exception for the application."""
    pass

class RepositoryError(BaseAppException):
    """Base class for failures raised by the user repository."""
    pass

class DatabaseConnectionError(RepositoryError):
    """Raised when a MongoDB client cannot be created for the given URI."""
    pass

class IndexCreationError(RepositoryError):
    """Raised when the email index cannot be created."""
    pass

class DuplicateUserError(RepositoryError):
    """Raised when an insert violates a unique index (code 11000)."""

    def __init__(self, cause: Exception):
        super().__init__(f"user found in doc: {cause}")
        self.cause = cause

class UserWriteError(RepositoryError):
    """Raised when an insert fails for any reason other than a duplicate key."""
    pass

class UserLookupError(RepositoryError):
    """Raised when looking up a user fails for a reason other than no match."""
    pass
