"""
Domain errors raised by the service layer.

Services never build HTTP responses. They raise one of the errors below and
the handler registered in main.py turns the error kind into a status code.
"""

from enum import Enum
from starlette import status


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    AUTH = "auth"
    NOT_FOUND = "not_found"
    STORAGE = "storage"
    INTERNAL = "internal"


GENERIC_ERROR_DETAIL = "Internal Server Error"

# Only AUTH and NOT_FOUND are surfaced to clients; every other kind
# collapses into the generic 500.
STATUS_BY_KIND = {
    ErrorKind.AUTH: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.STORAGE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ShopError(Exception):
    kind = ErrorKind.INTERNAL

    def __init__(self, message: str = GENERIC_ERROR_DETAIL):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    @property
    def public_detail(self) -> str:
        if self.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            return GENERIC_ERROR_DETAIL
        return self.message


class ValidationError(ShopError):
    """Duplicate or missing required field."""
    kind = ErrorKind.VALIDATION


class AuthError(ShopError):
    kind = ErrorKind.AUTH


class NotFoundError(ShopError):
    kind = ErrorKind.NOT_FOUND


class StorageError(ShopError):
    """Filesystem failure while persisting an upload."""
    kind = ErrorKind.STORAGE


class InternalError(ShopError):
    kind = ErrorKind.INTERNAL
