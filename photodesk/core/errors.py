"""Domain errors raised by the store and services; the app maps each to an HTTP status."""


class PhotoDeskError(Exception):
    """Base class for expected, caller-visible failures."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(PhotoDeskError):
    """Referenced entity id does not exist."""

    status_code = 404


class ValidationError(PhotoDeskError):
    """Malformed or missing required input (e.g. empty comment content)."""

    status_code = 400


class UnauthorizedError(PhotoDeskError):
    """Portal password missing or incorrect."""

    status_code = 401


class ForbiddenError(PhotoDeskError):
    """Authenticated caller does not own the resource."""

    status_code = 403
