"""Custom exception classes for the application."""


class AppError(Exception):
    """Base application error class."""

    def __init__(self, message, status_code=400):
        """Initialize the error."""
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ValidationError(AppError):
    """Raised when user input fails validation."""

    def __init__(self, message="Validation failed."):
        """Initialize the error."""
        super().__init__(message, 400)


class NotFoundError(AppError):
    """Raised when a resource is not found."""

    def __init__(self, message="Resource not found."):
        """Initialize the error."""
        super().__init__(message, 404)


class AccessDenied(AppError):
    """Raised when a user may not perform an action on a resource."""

    def __init__(self, message="You are not allowed to do that."):
        """Initialize the error."""
        super().__init__(message, 403)


class StoreError(AppError):
    """Raised when the underlying document store fails."""

    def __init__(self, message="The data store is unavailable."):
        """Initialize the error."""
        super().__init__(message, 503)


class StoreReadError(StoreError):
    """Raised when reading from the document store fails."""


class StoreWriteError(StoreError):
    """Raised when writing to the document store fails."""
