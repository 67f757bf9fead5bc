"""
Application error taxonomy.

Every error raised by the repositories and services derives from ``AppError``
and carries the HTTP status it is surfaced with. The API layer turns these
into the standard response envelope.
"""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str = "internal error"):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed identifier, pagination parameter, body or password."""

    status_code = 400


class InvalidCredentials(ValidationError):
    """Supplied current password does not match the stored one."""

    def __init__(self, message: str = "old password did not match"):
        super().__init__(message)


class NotFoundError(AppError):
    """No live (non-deleted) row matches the identity."""

    status_code = 404

    def __init__(self, entity: str, entity_id: object):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class StorageError(AppError):
    """Connection failure, constraint violation or failed query."""

    status_code = 500
