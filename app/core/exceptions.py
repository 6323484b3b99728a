class AppException(Exception):
    """Base error crossing the service boundary. Carries an HTTP-equivalent status."""

    status_code: int = 500
    error_type: str = "internal_error"

    def __init__(self, message: str, status_code: int = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(AppException):
    """Malformed input or an illegal state transition."""

    status_code = 400
    error_type = "validation_error"


class NotFoundError(AppException):
    status_code = 404
    error_type = "not_found"

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


class ConflictError(AppException):
    """A concurrent write lost a uniqueness race."""

    status_code = 409
    error_type = "conflict"


class InternalError(AppException):
    status_code = 500
    error_type = "internal_error"

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message)
