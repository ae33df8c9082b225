"""Error taxonomy shared by store, services and routers."""
from __future__ import annotations


class DomainError(Exception):
    """Base exception carrying a user-facing message plus its HTTP mapping."""

    code = "error"
    status_code = 400

    def __init__(self, message: str, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code


class DatabaseError(DomainError):
    code = "database_error"
    status_code = 500


class DatabaseReadError(DatabaseError):
    """Raised when the table file is missing, unreadable or malformed."""


class DatabaseWriteError(DatabaseError):
    """Raised when the table file cannot be rewritten."""


class NeighborhoodValidationError(DomainError):
    """Raised when a candidate record breaks a field constraint."""

    code = "invalid"
    status_code = 400


class EmptyNameError(NeighborhoodValidationError):
    pass


class NameTooLongError(NeighborhoodValidationError):
    pass


class MissingValueError(NeighborhoodValidationError):
    pass


class NonPositiveValueError(NeighborhoodValidationError):
    pass


class ValueTooLongError(NeighborhoodValidationError):
    pass


class DuplicateNameError(DomainError):
    """Raised when another record already uses the same district name."""

    code = "already_exists"
    status_code = 409


class NeighborhoodNotFoundError(DomainError):
    code = "not_found"
    status_code = 404


class InvalidParameterError(DomainError):
    """Raised when paging arguments are missing or negative."""

    code = "invalid_parameter"
    status_code = 400
