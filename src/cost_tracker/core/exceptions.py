"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 500

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails (including backdated costs)."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class StoreError(AppError):
    """Raised when the underlying persistence layer fails."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message, code="STORE_ERROR")
