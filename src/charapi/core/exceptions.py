"""Custom exceptions for the application."""


class AppException(Exception):
    """Base exception for all Character API errors."""
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


# Authentication Exceptions
class InvalidCredentialsError(AppException):
    """Invalid email or password."""
    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, status_code=401)


class InvalidTokenError(AppException):
    """Missing, invalid or expired token."""
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, status_code=401)


class EmailAlreadyExistsError(AppException):
    """Email already registered."""
    def __init__(self, message: str = "Email already exists"):
        super().__init__(message, status_code=409)


class ForbiddenError(AppException):
    """Revoked token or insufficient role."""
    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, status_code=403)


# Resource Exceptions
class ResourceNotFoundError(AppException):
    """Resource not found."""
    def __init__(self, resource: str, id: object):
        self.resource = resource
        self.id = id
        super().__init__(f"{resource} with id {id} not found", status_code=404)


# Validation Exceptions
class ValidationError(AppException):
    """Malformed request body or fields."""
    def __init__(self, message: str = "Bad Request"):
        super().__init__(message, status_code=400)
