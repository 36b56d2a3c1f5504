from fastapi import status

from libs.result import Error
from src.domain.errors import COMPENSATION_FAILURE, ErrorKind, kind_of

STATUS_BY_KIND = {
    ErrorKind.validation: status.HTTP_400_BAD_REQUEST,
    ErrorKind.authentication: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.forbidden: status.HTTP_403_FORBIDDEN,
    ErrorKind.not_found: status.HTTP_404_NOT_FOUND,
    ErrorKind.conflict: status.HTTP_409_CONFLICT,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Map a use case Error onto the HTTP error it is reported as"""
    details = error.details or {}
    if details.get("compensation_failed"):
        # Partial state was left behind; the original cause stays in details
        raise ServerError(
            Error(
                COMPENSATION_FAILURE,
                "Rollback did not complete, manual reconciliation required",
                {"cause": error.code, **details},
            )
        )

    kind = kind_of(error)
    if kind in STATUS_BY_KIND:
        raise ClientError(error, status_code=STATUS_BY_KIND[kind])
    if kind == ErrorKind.dependency:
        raise ServerError(error, status_code=status.HTTP_502_BAD_GATEWAY)
    raise ServerError(error)
