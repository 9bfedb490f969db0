"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class DirectoryServiceError(ApplicationError):
    """Raised when a call to the identity directory fails."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation


class MutationError(DirectoryServiceError):
    """Raised when an access key status update fails."""

    def __init__(self, user_name: str, key_id: str, message: str) -> None:
        super().__init__("UpdateAccessKey", message)
        self.user_name = user_name
        self.key_id = key_id
