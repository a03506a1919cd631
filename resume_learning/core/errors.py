"""Error taxonomy shared by services and the HTTP layer.

Every error carries a human-readable message and the HTTP status it maps to.
The API turns them into the standard envelope ``{"success": false, "message": ...}``.
"""


class AppError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(AppError):
    """Missing or empty required field."""

    status_code = 400


class DecodeError(AppError):
    """Request body could not be decoded."""

    status_code = 400

    def __init__(self, message: str = "Invalid request body"):
        super().__init__(message)


class NotFoundError(AppError):
    status_code = 404

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


class StoreError(AppError):
    """Record store failure, including timeouts."""

    status_code = 500

    def __init__(self, message: str = "Database error"):
        super().__init__(message)
