"""
Error taxonomy for the tenancy engine.

Business failures travel as ``libs.result.Error`` values whose ``code`` is one
of the constants below; ``kind_of`` classifies a code into its taxonomy kind.
Infrastructure failures of the collaborators surface as exceptions.
"""

from enum import Enum
from typing import Dict, Optional

from libs.result import Error


class ErrorKind(str, Enum):
    validation = "validation"
    conflict = "conflict"
    not_found = "not_found"
    authentication = "authentication"
    forbidden = "forbidden"
    dependency = "dependency"
    compensation_failure = "compensation_failure"


# Validation
INVALID_INPUT = "INVALID_INPUT"
ROLE_NOT_ASSIGNABLE = "ROLE_NOT_ASSIGNABLE"
DEFAULT_ORGANIZATION_IMMUTABLE = "DEFAULT_ORGANIZATION_IMMUTABLE"
SUPER_ADMIN_PROTECTED = "SUPER_ADMIN_PROTECTED"
INVALID_SUBSCRIPTION_WINDOW = "INVALID_SUBSCRIPTION_WINDOW"
NOT_A_MEMBER = "NOT_A_MEMBER"

# Conflict
DUPLICATE_MEMBERSHIP = "DUPLICATE_MEMBERSHIP"
TENANT_ALREADY_EXISTS = "TENANT_ALREADY_EXISTS"
SEAT_LIMIT_EXCEEDED = "SEAT_LIMIT_EXCEEDED"
ALREADY_REGISTERED = "ALREADY_REGISTERED"

# Not found
PRINCIPAL_NOT_FOUND = "PRINCIPAL_NOT_FOUND"
ORGANIZATION_NOT_FOUND = "ORGANIZATION_NOT_FOUND"
MEMBERSHIP_NOT_FOUND = "MEMBERSHIP_NOT_FOUND"
ROLE_NOT_FOUND = "ROLE_NOT_FOUND"
SUBSCRIPTION_PLAN_NOT_FOUND = "SUBSCRIPTION_PLAN_NOT_FOUND"

# Authentication
INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
NO_MEMBERSHIPS = "NO_MEMBERSHIPS"

# Forbidden
NOT_SUPER_ADMIN = "NOT_SUPER_ADMIN"

# Dependency
DEPENDENCY_FAILURE = "DEPENDENCY_FAILURE"

# Compensation
COMPENSATION_FAILURE = "COMPENSATION_FAILURE"


_KINDS: Dict[str, ErrorKind] = {
    INVALID_INPUT: ErrorKind.validation,
    ROLE_NOT_ASSIGNABLE: ErrorKind.validation,
    DEFAULT_ORGANIZATION_IMMUTABLE: ErrorKind.validation,
    SUPER_ADMIN_PROTECTED: ErrorKind.validation,
    INVALID_SUBSCRIPTION_WINDOW: ErrorKind.validation,
    NOT_A_MEMBER: ErrorKind.validation,
    DUPLICATE_MEMBERSHIP: ErrorKind.conflict,
    TENANT_ALREADY_EXISTS: ErrorKind.conflict,
    SEAT_LIMIT_EXCEEDED: ErrorKind.conflict,
    ALREADY_REGISTERED: ErrorKind.conflict,
    PRINCIPAL_NOT_FOUND: ErrorKind.not_found,
    ORGANIZATION_NOT_FOUND: ErrorKind.not_found,
    MEMBERSHIP_NOT_FOUND: ErrorKind.not_found,
    ROLE_NOT_FOUND: ErrorKind.not_found,
    SUBSCRIPTION_PLAN_NOT_FOUND: ErrorKind.not_found,
    INVALID_CREDENTIALS: ErrorKind.authentication,
    NO_MEMBERSHIPS: ErrorKind.authentication,
    NOT_SUPER_ADMIN: ErrorKind.forbidden,
    DEPENDENCY_FAILURE: ErrorKind.dependency,
    COMPENSATION_FAILURE: ErrorKind.compensation_failure,
}


def kind_of(error: Error) -> ErrorKind:
    """Taxonomy kind of an error; unknown codes count as dependency failures"""
    return _KINDS.get(error.code, ErrorKind.dependency)


class DependencyError(Exception):
    """A collaborator call failed for an infrastructure reason"""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        message = f"{operation} failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)

    def to_error(self) -> Error:
        return Error(DEPENDENCY_FAILURE, str(self), {"operation": self.operation})


class StoreConflictError(DependencyError):
    """A write was rejected by a storage-level uniqueness constraint"""
