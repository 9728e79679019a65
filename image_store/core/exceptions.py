# image_store/core/exceptions.py

class AppError(Exception):
    def __init__(self, message: str, *, status_code: int = 400, details: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found", *, details: str | None = None) -> None:
        super().__init__(message, status_code=404, details=details)


class RequestValidationError(AppError):
    def __init__(self, message: str = "Validation error", *, details: str | None = None) -> None:
        super().__init__(message, status_code=400, details=details)
