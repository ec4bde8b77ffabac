"""Domain errors raised by services and rendered by the API layer."""


class AppError(Exception):
    """Base class for errors that map to a client-facing HTTP response."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthorized(AppError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class InvalidInput(AppError):
    status_code = 400


class NotFound(AppError):
    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class Conflict(AppError):
    """The record is no longer in a state that allows the operation."""

    status_code = 400
