# server/core/errors.py

"""
Error taxonomy shared by the session and inventory services.

Each error knows the HTTP status and the client-facing message it maps to,
so the exception handlers in main.py never have to inspect internals.
"""


class ServiceError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(ServiceError):
    """Client-fixable input problem. `errors` maps field name to message."""

    status_code = 400
    message = "Validation failed"

    def __init__(self, errors: dict[str, str], message: str | None = None):
        super().__init__(message)
        self.errors = dict(errors)


class ConflictError(ServiceError):
    status_code = 409
    message = "Resource already exists"


class AuthError(ServiceError):
    status_code = 401
    message = "Not authenticated"


class InvalidCredentialsError(ServiceError):
    status_code = 401
    message = "Invalid credentials"


class NotFoundError(ServiceError):
    status_code = 404
    message = "Item not found"


class StorageError(ServiceError):
    status_code = 500
    message = "Internal server error"
